"""
Search Tabs Helper Module

Works out which search tabs to show and which hidden filters belong to them.

Tab identifiers are either a backend class (``Solr``) or a class with a
suffix (``Solr:books``) for tabs that apply extra hidden filters.
"""

from typing import Any, Collection, Dict, List, Mapping, Optional


def extract_class_name(tab_id: str) -> str:
    return tab_id.split(":", 1)[0]


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [item.strip() for item in str(value).split(",") if item.strip()]


class SearchTabsHelper:
    """
    Args:
        results_manager: Plugin manager for search results
        tab_config (dict): tab id -> label
        filter_config (dict): tab id -> hidden filters
        request: Current request (or None outside a request)
        permission_config (dict): tab id -> permission required to see the tab
    """

    def __init__(
        self,
        results_manager: Any,
        tab_config: Mapping[str, str],
        filter_config: Mapping[str, Any],
        request: Any,
        permission_config: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.results_manager = results_manager
        self.tab_config = dict(tab_config)
        self.filter_config = dict(filter_config)
        self.request = request
        self.permission_config = dict(permission_config or {})

    def get_results(self, tab_id: str) -> Any:
        """Fresh results object for the tab, with its hidden filters applied."""
        results = self.results_manager.get(extract_class_name(tab_id))
        for item in self.get_tab_filters(tab_id):
            results.get_params().add_filter(item)
        return results

    def get_tab_filters(self, tab_id: str) -> List[str]:
        return _as_list(self.filter_config.get(tab_id))

    def get_default_filters(self, search_class_id: str) -> List[str]:
        for tab_id in self.tab_config:
            if extract_class_name(tab_id) == search_class_id:
                return self.get_tab_filters(tab_id)
        return []

    def _request_hidden_filters(self) -> List[str]:
        if self.request is None:
            return []
        try:
            args = self.request.args
        except RuntimeError:
            # Outside request context
            return []
        getlist = getattr(args, "getlist", None)
        return list(getlist("hiddenFilters")) if getlist else _as_list(args.get("hiddenFilters"))

    def get_hidden_filters(
        self,
        search_class_id: str,
        return_defaults_if_empty: bool = True,
        ignore_current_request: bool = False,
    ) -> List[str]:
        """Hidden filters in force for ``search_class_id``."""
        filters = [] if ignore_current_request else self._request_hidden_filters()
        if not filters and return_defaults_if_empty:
            filters = self.get_default_filters(search_class_id)
        return filters

    def is_tab_permitted(self, tab_id: str, permissions: Optional[Collection[str]] = None) -> bool:
        required = self.permission_config.get(tab_id)
        return not required or required in (permissions or ())

    def get_tab_config(
        self,
        active_search_class: str,
        hidden_filters: Optional[List[str]] = None,
        permissions: Optional[Collection[str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Tabs to display, in configured order.

        A tab is selected when its class is the active one and its hidden
        filters equal the filters in force.
        """
        if hidden_filters is None:
            hidden_filters = self.get_hidden_filters(active_search_class)
        tabs = []
        for tab_id, label in self.tab_config.items():
            if not self.is_tab_permitted(tab_id, permissions):
                continue
            search_class = extract_class_name(tab_id)
            tab_filters = self.get_tab_filters(tab_id)
            tabs.append({
                "id": tab_id,
                "class": search_class,
                "label": label,
                "permission": self.permission_config.get(tab_id),
                "filters": tab_filters,
                "selected": search_class == active_search_class
                and sorted(tab_filters) == sorted(hidden_filters),
            })
        return tabs
