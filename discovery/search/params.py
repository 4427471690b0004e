"""
Search Parameters Module

User-facing search parameters for one backend.
"""

from typing import Any, Dict, List, Mapping, Optional

from ..settings.reader import ConfigManager, ConfigSection

DEFAULT_LIMIT = 20


class SearchParams:
    """Query, filters, facets and paging for a search against one backend."""

    def __init__(self, backend_id: str, config_manager: ConfigManager) -> None:
        self.backend_id = backend_id
        self.config_manager = config_manager
        self.lookfor = ""
        self.search_type = "AllFields"
        self.filters: List[str] = []
        self.facets: Dict[str, str] = {}
        self.limit = DEFAULT_LIMIT
        self.page = 1

    def get_facet_config(self, section: str = "Results") -> ConfigSection:
        return self.config_manager.get("facets").section(section)

    def init_from_request(self, args: Mapping[str, Any]) -> None:
        """Read ``lookfor``, ``type``, ``filter``, ``page`` and ``limit`` from request args."""
        self.set_basic_search(args.get("lookfor", ""), args.get("type") or "AllFields")
        getlist = getattr(args, "getlist", None)
        filters = getlist("filter") if getlist else args.get("filter", [])
        if isinstance(filters, str):
            filters = [filters]
        for item in filters:
            self.add_filter(item)
        self.page = max(1, int(args.get("page") or 1))
        if args.get("limit"):
            self.limit = max(1, int(args.get("limit")))

    def set_basic_search(self, lookfor: str, search_type: str = "AllFields") -> None:
        self.lookfor = (lookfor or "").strip()
        self.search_type = search_type

    def get_display_query(self) -> str:
        return self.lookfor

    def add_filter(self, filter_string: str) -> None:
        if filter_string and filter_string not in self.filters:
            self.filters.append(filter_string)

    def has_filter(self, filter_string: str) -> bool:
        return filter_string in self.filters

    def get_filters(self) -> List[str]:
        return list(self.filters)

    def add_facet(self, field: str, label: Optional[str] = None) -> None:
        self.facets[field] = label or field

    def get_facet_label(self, field: str) -> str:
        return self.facets.get(field, field)

    def set_limit(self, limit: int) -> None:
        self.limit = limit

    def get_offset(self) -> int:
        return (self.page - 1) * self.limit

    def get_query(self) -> Dict[str, Any]:
        return {"lookfor": self.lookfor, "type": self.search_type}

    def get_backend_parameters(self) -> Dict[str, Any]:
        return {"filters": self.get_filters(), "facets": list(self.facets)}
