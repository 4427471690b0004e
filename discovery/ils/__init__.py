"""
ILS Package

Connection to the integrated library system (catalog and circulation).
"""

from .connection import Connection
from .drivers import AbstractDriver, Demo, NoILS, create_driver

__all__ = ["Connection", "AbstractDriver", "Demo", "NoILS", "create_driver"]
