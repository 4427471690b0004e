"""
User Model

This module defines the User model for representing a logged-in patron.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional


@dataclass
class User:
    """
    Model representing a user account and its linked catalog credentials.
    """
    username: str
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    cat_username: Optional[str] = None
    cat_password: Optional[str] = None
    auth_method: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the user object to a dictionary for session storage.

        Returns:
            Dict[str, Any]: Dictionary representation of the user
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """
        Create a User instance from a dictionary.

        Args:
            data (Dict[str, Any]): Dictionary containing user data

        Returns:
            User: A new User instance
        """
        return cls(**data)
