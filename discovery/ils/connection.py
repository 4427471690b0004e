"""ILS Connection Module"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import AppError, ILSError
from .drivers import AbstractDriver

logger = logging.getLogger(__name__)


class Connection:
    """Front for the configured ILS driver."""

    def __init__(self, driver: AbstractDriver) -> None:
        self.driver = driver

    def get_driver_class(self) -> str:
        return type(self.driver).__name__

    def patron_login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Log a patron into the catalog.

        Returns:
            dict or None: Patron details, or None for bad credentials

        Raises:
            ILSError: If the catalog itself fails
        """
        try:
            return self.driver.patron_login(username, password)
        except AppError:
            raise
        except Exception as e:
            logger.error(f"ILS patron login failed: {e}")
            raise ILSError(f"Catalog login failed: {e}") from e

    def get_login_drivers(self) -> List[str]:
        return self.driver.get_login_drivers()

    def get_default_login_driver(self) -> Optional[str]:
        return self.driver.get_default_login_driver()
