"""
Shibboleth Authentication Module

Trusts attributes placed in the WSGI environment by a Shibboleth SP.
"""

import re
from typing import Any, Optional
from urllib.parse import quote

from ..exceptions import AuthError, ConfigurationError
from ..models.user import User
from .base import AbstractBase

DEFAULT_USERNAME_ATTRIBUTE = "REMOTE_USER"
PROFILE_ATTRIBUTES = ("firstname", "lastname", "email")


class Shibboleth(AbstractBase):
    """Shibboleth strategy; remembers the Shibboleth session id for logout."""

    def __init__(self, session_manager: Any) -> None:
        super().__init__()
        self.session_manager = session_manager

    def _section(self):
        return self.get_config().section("Shibboleth")

    def authenticate(self, request: Any) -> User:
        environ = getattr(request, "environ", {}) or {}
        section = self._section()
        username = environ.get(section.get("username") or DEFAULT_USERNAME_ATTRIBUTE)
        if not username:
            raise AuthError("authentication_error_admin")

        # Required attributes: userattribute_N must match userattribute_value_N
        index = 1
        while f"userattribute_{index}" in section:
            attribute = section.get(f"userattribute_{index}")
            pattern = section.get(f"userattribute_value_{index}", "")
            if not re.search(pattern, str(environ.get(attribute, ""))):
                raise AuthError("authentication_error_denied")
            index += 1

        session_id = environ.get("Shib-Session-ID")
        if session_id:
            self.session_manager.get_storage()["shibboleth_session_id"] = session_id

        profile = {
            name: environ.get(section.get(name), "") if section.get(name) else ""
            for name in PROFILE_ATTRIBUTES
        }
        return User(username=username, auth_method="Shibboleth", **profile)

    def get_session_initiator(self, target: str) -> Optional[str]:
        login = self._section().get("login")
        if not login:
            raise ConfigurationError("Shibboleth login configuration parameter is not set.")
        separator = "&" if "?" in login else "?"
        return f"{login}{separator}target={quote(target, safe='')}"

    def logout(self, url: str) -> str:
        logout = self._section().get("logout")
        if not logout:
            return url
        separator = "&" if "?" in logout else "?"
        return f"{logout}{separator}return={quote(url, safe='')}"
