"""
Facet Recommendation Modules

Modules that request facets from the search and present them beside,
above or in place of the result list.
"""

from typing import Any, Dict, List, Optional

from ..search.facet_helper import HierarchicalFacetHelper
from ..settings.reader import ConfigManager
from .base import RecommendInterface, request_value, split_settings


class AbstractFacets(RecommendInterface):
    """Facet modules reading their field list from a facets INI section."""

    default_section = "Results"
    default_ini = "facets"

    def __init__(self, config_manager: ConfigManager) -> None:
        super().__init__()
        self.config_manager = config_manager
        self.facets: Dict[str, str] = {}

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        section, ini = split_settings(settings, 2, [self.default_section, self.default_ini])
        config = self.config_manager.get(ini)
        self.facets = dict(config.section(section))
        self.load_extra_config(config)

    def load_extra_config(self, config) -> None:
        """Hook for subclasses reading more than the field list."""

    def init(self, params: Any, request: Any) -> None:
        for field, label in self.facets.items():
            params.add_facet(field, label)

    def get_facet_set(self) -> Dict[str, Dict[str, Any]]:
        if self.results is None:
            return {}
        return self.results.get_facet_list(list(self.facets))

    def get_data(self) -> Dict[str, Any]:
        return {"facets": self.get_facet_set()}


class SideFacets(AbstractFacets):
    """
    Facets shown in the sidebar.

    Settings: ``section:ini`` (default ``Results:facets``). Fields listed in
    ``[SpecialFacets] hierarchical`` are sorted and nested with the
    hierarchical facet helper.
    """

    def __init__(self, config_manager: ConfigManager,
                 facet_helper: Optional[HierarchicalFacetHelper] = None) -> None:
        super().__init__(config_manager)
        self.facet_helper = facet_helper
        self.hierarchical: List[str] = []

    def load_extra_config(self, config) -> None:
        self.hierarchical = config.section("SpecialFacets").get_list("hierarchical")

    def get_facet_set(self) -> Dict[str, Dict[str, Any]]:
        facet_set = super().get_facet_set()
        if self.facet_helper is None:
            return facet_set
        for field in self.hierarchical:
            if field in facet_set:
                values = self.facet_helper.sort_facet_list(facet_set[field]["list"])
                facet_set[field]["list"] = self.facet_helper.build_facet_array(values)
        return facet_set

    def get_hierarchical_facets(self) -> List[str]:
        return list(self.hierarchical)


class CollectionSideFacets(SideFacets):
    """
    Sidebar facets on collection pages.

    Settings: ``section:ini:keyword_filter_field`` (default
    ``Results:Collection``). The keyword filter narrows the collection
    listing by the ``lookfor`` argument of the request.
    """

    default_ini = "Collection"

    def __init__(self, config_manager: ConfigManager,
                 facet_helper: Optional[HierarchicalFacetHelper] = None) -> None:
        super().__init__(config_manager, facet_helper)
        self.keyword_filter_field = ""
        self.keyword_filter = ""

    def set_config(self, settings: str) -> None:
        section, ini, keyword_field = split_settings(settings, 3, [self.default_section, self.default_ini])
        super().set_config(f"{section}:{ini}")
        self.keyword_filter_field = keyword_field

    def init(self, params: Any, request: Any) -> None:
        super().init(params, request)
        self.keyword_filter = request_value(request, "lookfor")
        if self.keyword_filter_field and self.keyword_filter:
            params.add_filter(f'{self.keyword_filter_field}:"{self.keyword_filter}"')

    def get_keyword_filter(self) -> str:
        return self.keyword_filter

    def get_data(self) -> Dict[str, Any]:
        data = super().get_data()
        data["keyword_filter"] = self.keyword_filter
        return data


class FavoriteFacets(SideFacets):
    """Facets for a user's saved items: lists, plus tags when tagging is enabled."""

    def __init__(self, config_manager: ConfigManager,
                 facet_helper: Optional[HierarchicalFacetHelper] = None,
                 tag_setting: str = "enabled") -> None:
        super().__init__(config_manager, facet_helper)
        self.tag_setting = tag_setting

    def set_config(self, settings: str) -> None:
        self.settings = settings or ""
        self.facets = {"lists": "Your Lists"}
        if self.tag_setting != "disabled":
            self.facets["tags"] = "Your Tags"


class TopFacets(AbstractFacets):
    """Facets shown above the result list (``ResultsTop:facets`` by default)."""

    default_section = "ResultsTop"

    def get_top_facet_set(self) -> Dict[str, Dict[str, Any]]:
        return self.get_facet_set()


class VisualFacets(AbstractFacets):
    """
    Pivot facets for visualization.

    Settings: ``fields:ini``; ``fields`` is a comma-separated field list
    (default ``callnumber-first,topic_facet``) whose labels come from the
    ``[Results]`` section of the INI file.
    """

    default_fields = "callnumber-first,topic_facet"

    def set_config(self, settings: str) -> None:
        self.settings = settings or ""
        fields, ini = split_settings(settings, 2, [self.default_fields, self.default_ini])
        labels = self.config_manager.get(ini).section(self.default_section)
        self.facets = {
            field.strip(): labels.get(field.strip(), field.strip())
            for field in fields.split(",") if field.strip()
        }

    def get_pivot_facets(self) -> List[Dict[str, Any]]:
        """Facet values of the first field, each with its counts in the second."""
        facet_set = self.get_facet_set()
        fields = list(self.facets)
        if not fields or fields[0] not in facet_set:
            return []
        pivots = []
        for item in facet_set[fields[0]]["list"]:
            pivot = {"field": fields[0], "value": item["value"], "count": item["count"], "pivot": []}
            if len(fields) > 1 and fields[1] in facet_set:
                pivot["pivot"] = [
                    {"field": fields[1], "value": sub["value"], "count": sub["count"]}
                    for sub in facet_set[fields[1]]["list"]
                ]
            pivots.append(pivot)
        return pivots

    def get_data(self) -> Dict[str, Any]:
        return {"pivot_facets": self.get_pivot_facets()}


class ExpandFacets(AbstractFacets):
    """
    Facets offered to widen a search.

    Takes an empty Solr results object so that templates can build links for
    fresh searches on a facet value.
    """

    def __init__(self, config_manager: ConfigManager, empty_results: Any) -> None:
        super().__init__(config_manager)
        self.empty_results = empty_results

    def get_expanded_set(self) -> Dict[str, Dict[str, Any]]:
        return self.get_facet_set()

    def get_empty_results(self) -> Any:
        return self.empty_results


class AuthorFacets(RecommendInterface):
    """
    Similar authors for the current query.

    Settings: ``backend:limit`` (default ``Solr:10``). Runs an author search
    for the ``lookfor`` argument and returns the ``author`` facet values.
    """

    def __init__(self, results_manager: Any) -> None:
        super().__init__()
        self.results_manager = results_manager
        self.backend = "Solr"
        self.limit = 10
        self.lookfor = ""

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        backend, limit = split_settings(settings, 2, ["Solr", "10"])
        self.backend = backend
        self.limit = int(limit)

    def init(self, params: Any, request: Any) -> None:
        self.lookfor = request_value(request, "lookfor")

    def process(self, results: Any) -> None:
        super().process(results)
        if not self.lookfor and results is not None:
            self.lookfor = results.get_params().get_display_query()

    def get_similar_authors(self) -> List[Dict[str, Any]]:
        if not self.lookfor or not self.results_manager.has(self.backend):
            return []
        results = self.results_manager.get(self.backend)
        params = results.get_params()
        params.set_basic_search(self.lookfor, "author")
        params.add_facet("author", "Author")
        facets = results.get_facet_list(["author"])
        return facets.get("author", {}).get("list", [])[:self.limit]

    def get_data(self) -> Dict[str, Any]:
        return {"similar_authors": self.get_similar_authors()}
