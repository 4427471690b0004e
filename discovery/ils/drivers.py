"""
ILS Driver Module

Drivers talking to the integrated library system. Only the patron login
surface needed by authentication is modelled here.
"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import ILSError
from ..settings.reader import ConfigSection

logger = logging.getLogger(__name__)


class AbstractDriver:
    """Base class for ILS drivers."""

    def __init__(self, config: Optional[ConfigSection] = None) -> None:
        self.config = config if config is not None else ConfigSection()

    def patron_login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def get_login_drivers(self) -> List[str]:
        return []

    def get_default_login_driver(self) -> Optional[str]:
        drivers = self.get_login_drivers()
        return drivers[0] if drivers else None


class NoILS(AbstractDriver):
    """Driver used when no catalog is connected; logins always fail."""

    def patron_login(self, username, password):
        return None


class Demo(AbstractDriver):
    """
    Driver backed by configuration, for demonstrations and tests.

    ``[Demo] patrons`` lists ``username:password`` pairs; ``[Demo]
    login_targets`` lists the login targets offered to MultiILS.
    """

    def _patrons(self) -> Dict[str, str]:
        patrons = {}
        for entry in self.config.get_list("patrons"):
            if ":" not in entry:
                raise ILSError(f"Malformed demo patron entry: {entry}")
            username, password = entry.split(":", 1)
            patrons[username.strip()] = password.strip()
        return patrons

    def patron_login(self, username, password):
        # MultiILS usernames carry a "target." prefix
        login = username
        target, _, rest = username.partition(".")
        if rest and target in self.get_login_drivers():
            login = rest
        if self._patrons().get(login) != password:
            return None
        return {
            "id": login,
            "cat_username": username,
            "cat_password": password,
            "firstname": login.capitalize(),
            "lastname": "Patron",
            "email": f"{login}@example.org",
        }

    def get_login_drivers(self):
        return self.config.get_list("login_targets")


DRIVERS = {"noils": NoILS, "demo": Demo}


def create_driver(name: str, config: ConfigSection) -> AbstractDriver:
    """Instantiate the driver called ``name`` with its own config section."""
    driver_class = DRIVERS.get(name.lower())
    if driver_class is None:
        raise ILSError(f"Unknown ILS driver: {name}")
    return driver_class(config.section(name))
