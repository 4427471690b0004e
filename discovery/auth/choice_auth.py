"""
ChoiceAuth Module

Lets the user pick one of several authentication strategies.
"""

from typing import Any, List, Optional

from ..exceptions import AuthError, ConfigurationError
from ..models.user import User
from .base import AbstractBase, request_param


class ChoiceAuth(AbstractBase):
    """
    Delegates to the strategy chosen by the user.

    The chosen strategy is remembered in the session container so that
    logout and session initiation reach the same strategy.
    """

    def __init__(self, container: Any) -> None:
        super().__init__()
        self.container = container
        self.plugin_manager = None
        self.strategies: List[str] = []

    def set_plugin_manager(self, plugin_manager: Any) -> None:
        self.plugin_manager = plugin_manager

    def validate_config(self) -> None:
        self.strategies = self.get_config().section("ChoiceAuth").get_list("choice_order")
        if not self.strategies:
            raise ConfigurationError("One or more ChoiceAuth parameters are missing.")

    def get_selectable_auth_options(self) -> List[str]:
        return list(self.strategies)

    def get_selected_auth_option(self) -> Optional[str]:
        return self.container.get("auth_method")

    def _get_strategy(self, method: str) -> Any:
        if method not in self.strategies:
            raise AuthError("authentication_error_technical")
        return self.plugin_manager.get(method)

    def authenticate(self, request: Any) -> User:
        method = request_param(request, "auth_method") or self.get_selected_auth_option()
        if not method:
            raise AuthError("authentication_error_technical")
        user = self._get_strategy(method).authenticate(request)
        self.container["auth_method"] = method
        return user

    def get_session_initiator(self, target: str) -> Optional[str]:
        for method in self.strategies:
            initiator = self.plugin_manager.get(method).get_session_initiator(target)
            if initiator:
                return initiator
        return None

    def logout(self, url: str) -> str:
        method = self.get_selected_auth_option()
        self.container.clear()
        if method and method in self.strategies:
            return self.plugin_manager.get(method).logout(url)
        return url
