"""
Authentication Manager Module

Tracks the logged-in user and runs the configured authentication strategy.
"""

import logging
from typing import Any, Optional

from ..models.user import User
from ..services.session import SessionContainer, SessionManager
from ..settings.reader import ConfigSection

logger = logging.getLogger(__name__)

DEFAULT_AUTH_METHOD = "ILS"


class AuthManager:
    """Login, logout and access to the current user."""

    def __init__(
        self, config: ConfigSection, session_manager: SessionManager, plugin_manager: Any
    ) -> None:
        self.config = config
        self.session_manager = session_manager
        self.plugin_manager = plugin_manager
        self.session = SessionContainer("Account", session_manager)

    def get_auth_method(self) -> str:
        return self.config.section("Authentication").get("method") or DEFAULT_AUTH_METHOD

    def get_auth(self, name: Optional[str] = None) -> Any:
        return self.plugin_manager.get(name or self.get_auth_method())

    def login(self, request: Any) -> User:
        """
        Authenticate with the active strategy and remember the user.

        Raises:
            AuthError: If the strategy rejects the credentials
        """
        method = self.get_auth_method()
        user = self.get_auth(method).authenticate(request)
        if not user.auth_method:
            user.auth_method = method
        self.update_user(user)
        logger.info(f"User {user.username} logged in via {user.auth_method}")
        return user

    def get_user(self) -> Optional[User]:
        data = self.session.get("user")
        return User.from_dict(data) if data else None

    def is_logged_in(self) -> Optional[User]:
        return self.get_user()

    def update_user(self, user: User) -> None:
        self.session["user"] = user.to_dict()

    def logout(self, url: str) -> str:
        """Forget the user; returns the URL the browser should go to next."""
        user = self.get_user()
        method = user.auth_method if user and user.auth_method else self.get_auth_method()
        url = self.get_auth(method).logout(url)
        self.session.clear()
        return url
