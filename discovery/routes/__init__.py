"""
Routes Package

This package contains all route definitions for the application.
"""

from .api import api_bp

# Export blueprints
__all__ = ["api_bp"]
