"""
Config Model

This module defines the AppConfig model for representing application configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class AppConfig:
    """
    Model representing application configuration for the frontend.
    """
    site_language: str
    max_tag_length: int
    tags_enabled: bool
    debug_mode: bool

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the config object to a dictionary for serialization.

        Returns:
            Dict[str, Any]: Dictionary representation of the config
        """
        return {
            "site_language": self.site_language,
            "max_tag_length": self.max_tag_length,
            "tags_enabled": self.tags_enabled,
            "debug_mode": self.debug_mode
        }
