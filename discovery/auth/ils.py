"""
ILS Authentication Module

Authenticate users against the catalog, optionally across several login
targets (MultiILS).
"""

from typing import Any, Dict, List, Optional

from ..exceptions import AuthError
from ..models.user import User
from .base import AbstractBase, request_param


class ILS(AbstractBase):
    """Log in with catalog (library card) credentials."""

    auth_method = "ILS"

    def __init__(self, catalog: Any, authenticator: Any) -> None:
        super().__init__()
        self.catalog = catalog
        self.authenticator = authenticator

    def authenticate(self, request: Any) -> User:
        username = request_param(request, "username").strip()
        password = request_param(request, "password")
        if not username or not password:
            raise AuthError("authentication_error_blank")
        return self._process_login(username, password)

    def _process_login(self, username: str, password: str) -> User:
        patron = self.authenticator.new_catalog_login(username, password)
        if not patron:
            raise AuthError("authentication_error_invalid")
        return self._build_user(patron, username, password)

    def _build_user(self, patron: Dict[str, Any], username: str, password: str) -> User:
        user = User(
            username=patron.get("cat_username") or username,
            firstname=patron.get("firstname", ""),
            lastname=patron.get("lastname", ""),
            email=patron.get("email", ""),
            auth_method=self.auth_method,
        )
        self.authenticator.store_credentials(user, username, password)
        return user


class MultiILS(ILS):
    """ILS login where the user also picks the library (login target)."""

    auth_method = "MultiILS"

    def get_login_targets(self) -> List[str]:
        return self.catalog.get_login_drivers()

    def get_default_login_target(self) -> Optional[str]:
        return self.catalog.get_default_login_driver()

    def authenticate(self, request: Any) -> User:
        username = request_param(request, "username").strip()
        password = request_param(request, "password")
        target = request_param(request, "target") or self.get_default_login_target()
        if not username or not password:
            raise AuthError("authentication_error_blank")
        if not target or target not in self.get_login_targets():
            raise AuthError("authentication_error_technical")
        return self._process_login(f"{target}.{username}", password)
