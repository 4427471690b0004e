"""
Authentication Package

Authentication strategies, the ILS authenticator and the auth manager.
"""

from .base import AbstractBase
from .choice_auth import ChoiceAuth
from .facebook import Facebook
from .ils import ILS, MultiILS
from .ils_authenticator import ILSAuthenticator
from .manager import AuthManager
from .multi_auth import MultiAuth
from .shibboleth import Shibboleth

__all__ = [
    "AbstractBase",
    "AuthManager",
    "ChoiceAuth",
    "Facebook",
    "ILS",
    "ILSAuthenticator",
    "MultiAuth",
    "MultiILS",
    "Shibboleth",
]
