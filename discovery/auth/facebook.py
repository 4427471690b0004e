"""
Facebook Authentication Module

OAuth login through Facebook.
"""

import logging
import secrets
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests

from ..exceptions import AuthError, ConfigurationError
from ..models.user import User
from .base import AbstractBase, HttpServiceAwareMixin, request_param

logger = logging.getLogger(__name__)

DIALOG_URL = "https://www.facebook.com/dialog/oauth"
GRAPH_URL = "https://graph.facebook.com/v2.8"


class Facebook(AbstractBase, HttpServiceAwareMixin):
    """Facebook OAuth strategy; login state lives in its session container."""

    def __init__(self, container: Any) -> None:
        super().__init__()
        self.container = container

    def _settings(self) -> Dict[str, str]:
        section = self.get_config().section("Facebook")
        if not section.get("appId") or not section.get("secret"):
            raise ConfigurationError("One or more Facebook parameters are missing.")
        return {"appId": section.get("appId"), "secret": section.get("secret")}

    def get_session_initiator(self, target: str) -> Optional[str]:
        settings = self._settings()
        state = secrets.token_hex(16)
        self.container["state"] = state
        self.container["redirect_uri"] = target
        query = {
            "client_id": settings["appId"],
            "redirect_uri": target,
            "state": state,
            "scope": "public_profile,email",
        }
        return f"{DIALOG_URL}?{urlencode(query)}"

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if self.http_service is None:
            raise AuthError("authentication_error_technical")
        try:
            response = self.http_service.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Facebook request failed: {e}")
            raise AuthError("authentication_error_technical") from e

    def authenticate(self, request: Any) -> User:
        settings = self._settings()
        code = request_param(request, "code")
        state = request_param(request, "state")
        if not code:
            raise AuthError("authentication_error_admin")
        if not state or state != self.container.get("state"):
            raise AuthError("authentication_error_denied")

        token = self._get_json(
            f"{GRAPH_URL}/oauth/access_token",
            {
                "client_id": settings["appId"],
                "redirect_uri": self.container.get("redirect_uri", ""),
                "client_secret": settings["secret"],
                "code": code,
            },
        ).get("access_token")
        if not token:
            raise AuthError("authentication_error_denied")

        details = self._get_json(
            f"{GRAPH_URL}/me",
            {"fields": "id,first_name,last_name,email", "access_token": token},
        )
        self.container.clear()
        if not details.get("id"):
            raise AuthError("authentication_error_denied")
        return User(
            username=details["id"],
            firstname=details.get("first_name", ""),
            lastname=details.get("last_name", ""),
            email=details.get("email", ""),
            auth_method="Facebook",
        )
