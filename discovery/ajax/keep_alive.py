"""
Keep Alive Handler Module

Keeps the user's session from expiring while a page stays open.
"""

from typing import Any, Mapping, Tuple

from ..services.session import SessionManager
from .base import AbstractBase


class KeepAlive(AbstractBase):
    def __init__(self, session_manager: SessionManager) -> None:
        self.session_manager = session_manager

    def handle_request(self, params: Mapping[str, Any]) -> Tuple[bool, str]:
        # Touching the id is enough to refresh the session
        self.session_manager.get_id()
        return True, "OK"


class KeepAliveFactory:
    """Callable factory: ``KeepAliveFactory()(container, requested_name)``."""

    def __call__(self, container: Any, requested_name: str, options: Any = None) -> KeepAlive:
        if options:
            raise ValueError("Unexpected options sent to factory.")
        return KeepAlive(container.get("session_manager"))
