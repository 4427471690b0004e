"""
ILS Authenticator Module

Keeps catalog (ILS) credentials attached to the logged-in user and logs
patrons into the catalog with them.
"""

import logging
from typing import Any, Dict, Optional

from cryptography.fernet import Fernet, InvalidToken

from ..exceptions import AuthError, ConfigurationError, ILSError
from ..models.user import User

logger = logging.getLogger(__name__)


class ILSAuthenticator:
    """
    Catalog login helper.

    Args:
        auth_manager: Manager holding the logged-in user
        catalog: ILS connection
        encryption_key (str, optional): Fernet key for stored catalog passwords
    """

    def __init__(self, auth_manager: Any, catalog: Any, encryption_key: Optional[str] = None) -> None:
        self.auth_manager = auth_manager
        self.catalog = catalog
        self._cipher = None
        if encryption_key:
            try:
                self._cipher = Fernet(encryption_key.encode())
            except ValueError as e:
                raise ConfigurationError(f"Invalid ILS encryption key: {e}") from e

    def encrypt(self, text: Optional[str]) -> Optional[str]:
        if text is None or self._cipher is None:
            return text
        return self._cipher.encrypt(text.encode()).decode()

    def decrypt(self, text: Optional[str]) -> Optional[str]:
        if text is None or self._cipher is None:
            return text
        try:
            return self._cipher.decrypt(text.encode()).decode()
        except InvalidToken:
            logger.error("Stored catalog password could not be decrypted")
            return None

    def store_credentials(self, user: User, username: str, password: str) -> None:
        """Attach catalog credentials to ``user``, encrypting the password."""
        user.cat_username = username
        user.cat_password = self.encrypt(password)

    def get_stored_catalog_credentials(self) -> Optional[Dict[str, str]]:
        user = self.auth_manager.get_user()
        if user is None or not user.cat_username:
            return None
        password = self.decrypt(user.cat_password)
        if password is None:
            return None
        return {"cat_username": user.cat_username, "cat_password": password}

    def stored_catalog_login(self) -> Optional[Dict[str, Any]]:
        """Log into the catalog with the credentials saved on the current user."""
        credentials = self.get_stored_catalog_credentials()
        if credentials is None:
            return None
        patron = self._patron_login(credentials["cat_username"], credentials["cat_password"])
        if patron is None:
            # Saved credentials no longer work; forget them
            user = self.auth_manager.get_user()
            user.cat_username = None
            user.cat_password = None
            self.auth_manager.update_user(user)
        return patron

    def new_catalog_login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Log into the catalog with fresh credentials.

        On success the credentials are saved on the logged-in user, if any.
        """
        patron = self._patron_login(username, password)
        if patron:
            user = self.auth_manager.get_user()
            if user is not None:
                self.store_credentials(user, username, password)
                self.auth_manager.update_user(user)
        return patron

    def _patron_login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        try:
            return self.catalog.patron_login(username, password)
        except ILSError as e:
            logger.error(f"Catalog login error: {e}")
            raise AuthError("authentication_error_technical") from e
