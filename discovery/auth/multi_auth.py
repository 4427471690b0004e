"""
MultiAuth Module

Tries several authentication strategies in turn.
"""

from typing import Any, List, Optional

from ..exceptions import AuthError, ConfigurationError
from ..models.user import User
from .base import AbstractBase


class MultiAuth(AbstractBase):
    """Returns the user from the first strategy in ``method_order`` that succeeds."""

    def __init__(self) -> None:
        super().__init__()
        self.plugin_manager = None
        self.method_order: List[str] = []

    def set_plugin_manager(self, plugin_manager: Any) -> None:
        self.plugin_manager = plugin_manager

    def validate_config(self) -> None:
        self.method_order = self.get_config().section("MultiAuth").get_list("method_order")
        if not self.method_order:
            raise ConfigurationError("One or more MultiAuth parameters are missing.")

    def authenticate(self, request: Any) -> User:
        last_error: Optional[AuthError] = None
        for method in self.method_order:
            try:
                return self.plugin_manager.get(method).authenticate(request)
            except AuthError as e:
                last_error = e
        raise last_error or AuthError()
