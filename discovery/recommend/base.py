"""
Recommendation Module Base

A recommendation module adds supplementary content next to search results.
Its lifecycle per search is ``set_config`` -> ``init`` -> ``process``.
"""

from typing import Any, Dict, List, Optional


def split_settings(settings: Optional[str], count: int, defaults: Optional[List[str]] = None) -> List[str]:
    """
    Split a colon-separated settings string into exactly ``count`` values.

    Missing or empty positions take the matching entry of ``defaults``.
    """
    defaults = list(defaults or [])
    defaults += [""] * (count - len(defaults))
    parts = (settings or "").split(":", count - 1)
    values = []
    for index in range(count):
        value = parts[index].strip() if index < len(parts) else ""
        values.append(value or defaults[index])
    return values


def request_value(request: Any, name: str, default: str = "") -> str:
    """Read a query argument from request args or any mapping."""
    getter = getattr(request, "get", None)
    value = getter(name) if getter is not None else None
    return value if value else default


class RecommendInterface:
    """Base class for recommendation modules."""

    def __init__(self) -> None:
        self.settings = ""
        self.results = None

    def set_config(self, settings: str) -> None:
        """Store the colon-separated settings string from the search configuration."""
        self.settings = settings or ""

    def init(self, params: Any, request: Any) -> None:
        """Called before the search runs; may adjust ``params``."""

    def process(self, results: Any) -> None:
        """Called after the search has run."""
        self.results = results

    def get_data(self) -> Dict[str, Any]:
        """JSON-ready output of the module after ``process``."""
        return {}
