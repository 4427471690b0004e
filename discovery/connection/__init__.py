"""
Connection Package

Clients for external bibliographic web services.
"""

from .worldcat import WorldCatUtils

__all__ = ["WorldCatUtils"]
