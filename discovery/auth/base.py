"""
Authentication Base Module

Common behaviour for authentication strategies.
"""

from typing import Any, Optional

from ..exceptions import AuthError
from ..models.user import User
from ..settings.reader import ConfigSection


def request_param(request: Any, name: str, default: str = "") -> str:
    """Read a parameter from the POST body first, then the query string."""
    for source in ("form", "args"):
        values = getattr(request, source, None)
        if values is not None and values.get(name) is not None:
            return values.get(name)
    return default


class AbstractBase:
    """Base class for authentication strategies."""

    def __init__(self) -> None:
        self.config: Optional[ConfigSection] = None

    def set_config(self, config: ConfigSection) -> None:
        self.config = config
        self.validate_config()

    def get_config(self) -> ConfigSection:
        return self.config if self.config is not None else ConfigSection()

    def validate_config(self) -> None:
        """Hook for strategies that need particular settings."""

    def authenticate(self, request: Any) -> User:
        """
        Attempt to authenticate the current user.

        Raises:
            AuthError: If authentication fails
        """
        raise NotImplementedError

    def supports_creation(self) -> bool:
        return False

    def create(self, request: Any) -> User:
        raise AuthError("Account creation not supported")

    def get_session_initiator(self, target: str) -> Optional[str]:
        """URL the browser is sent to for external login, if any."""
        return None

    def logout(self, url: str) -> str:
        """Return the URL to redirect to after logout."""
        return url


class HttpServiceAwareMixin:
    """Strategies that talk to remote services receive the HTTP service."""

    http_service = None

    def set_http_service(self, http_service: Any) -> None:
        self.http_service = http_service
