"""
Models Package

This package contains data models and DTOs for the application.
"""

from .user import User
from .config import AppConfig

__all__ = ['User', 'AppConfig']
