"""
Search Results Module

Runs a search described by SearchParams and exposes the outcome.
"""

from typing import Any, Dict, List, Optional

from .backend import RecordCollection
from .params import SearchParams
from .service import SearchService


class SearchResults:
    """Results of one search; the search runs on first access."""

    def __init__(self, params: SearchParams, search_service: SearchService) -> None:
        self.params = params
        self.search_service = search_service
        self._collection: Optional[RecordCollection] = None

    def get_params(self) -> SearchParams:
        return self.params

    def get_backend_id(self) -> str:
        return self.params.backend_id

    def perform_and_process_search(self) -> None:
        self._collection = self.search_service.search(
            self.params.backend_id,
            self.params.get_query(),
            self.params.get_offset(),
            self.params.limit,
            self.params.get_backend_parameters(),
        )

    def _get_collection(self) -> RecordCollection:
        if self._collection is None:
            self.perform_and_process_search()
        return self._collection

    def get_results(self) -> List[Dict[str, Any]]:
        return self._get_collection().records

    def get_result_total(self) -> int:
        return self._get_collection().total

    def get_backend_details(self) -> Dict[str, Any]:
        return self._get_collection().extra

    def get_facet_list(self, filter_fields: Optional[List[str]] = None) -> Dict[str, Dict[str, Any]]:
        """
        Facet values for the requested fields (default: all facets).

        Returns:
            dict: field -> {"label", "list": [{"value", "display_text", "count", "is_applied"}]}
        """
        facets = self._get_collection().facets
        fields = filter_fields if filter_fields is not None else list(facets)
        result: Dict[str, Dict[str, Any]] = {}
        for field in fields:
            if field not in facets:
                continue
            values = []
            for value, count in facets[field].items():
                values.append({
                    "value": value,
                    "display_text": value,
                    "count": count,
                    "is_applied": self.params.has_filter(f'{field}:"{value}"'),
                })
            result[field] = {"label": self.params.get_facet_label(field), "list": values}
        return result
