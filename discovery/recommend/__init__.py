"""Recommendation modules shown alongside search results."""

from .base import RecommendInterface
from .plugin_manager import RecommendPluginManager

__all__ = ["RecommendInterface", "RecommendPluginManager"]
