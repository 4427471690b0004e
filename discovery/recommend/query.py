"""
Query Recommendation Modules

Modules that look at the query itself: suggestions for a better query and
geographic selection.
"""

import re
from typing import Any, Dict, List

from ..search.backend import SearchBackend
from ..settings.reader import ConfigManager
from .base import RecommendInterface, request_value, split_settings

BOOLEAN_WORDS = ("and", "or", "not")


class SwitchQuery(RecommendInterface):
    """
    Suggests corrected versions of a query.

    Settings: ``backend:opt_out:opt_in``, where ``opt_out`` and ``opt_in``
    are comma-separated check names. Checks run by default: ``unwantedbools``,
    ``unwantedquotes``, ``wildcard``. Opt-in only: ``truncatechar``.
    """

    default_checks = ["unwantedbools", "unwantedquotes", "wildcard"]

    def __init__(self, backend_manager: Any) -> None:
        super().__init__()
        self.backend_manager = backend_manager
        self.backend = "Solr"
        self.checks = list(self.default_checks)
        self.suggestions: Dict[str, str] = {}

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        backend, opt_out, opt_in = split_settings(settings, 3, ["Solr"])
        self.backend = backend
        skip = {name.strip() for name in opt_out.split(",") if name.strip()}
        self.checks = [name for name in self.default_checks if name not in skip]
        self.checks += [name.strip() for name in opt_in.split(",") if name.strip()]

    def process(self, results: Any) -> None:
        super().process(results)
        self.suggestions = {}
        if results is None or not self.backend_manager.has(self.backend):
            return
        query = results.get_params().get_display_query()
        if not query:
            return
        for check in self.checks:
            method = getattr(self, f"check_{check}", None)
            if method is None:
                continue
            suggestion = method(query)
            if suggestion and suggestion != query:
                self.suggestions[f"switchquery_{check}"] = suggestion

    def check_unwantedbools(self, query: str) -> str:
        """Lowercase boolean words are treated as terms; suggest uppercasing them."""
        pattern = re.compile(r"\b(" + "|".join(BOOLEAN_WORDS) + r")\b")
        return pattern.sub(lambda match: match.group(1).upper(), query)

    def check_unwantedquotes(self, query: str) -> str:
        return query.replace('"', "") if '"' in query else ""

    def check_wildcard(self, query: str) -> str:
        """Leading wildcards are not supported; drop them."""
        return re.sub(r"(^|\s)[*?]+", r"\1", query)

    def check_truncatechar(self, query: str) -> str:
        return query.rstrip("*") + "*" if query and not query.endswith("*") else ""

    def get_suggestions(self) -> Dict[str, str]:
        return dict(self.suggestions)

    def get_data(self) -> Dict[str, Any]:
        return {"suggestions": self.get_suggestions()}


class MapSelection(RecommendInterface):
    """
    Bounding-box selection on a map.

    Settings: ``ini:section`` (default ``searches:MapSelection``); the
    section supplies ``geoField`` (default ``long_lat``),
    ``default_coordinates`` and ``height``.
    """

    def __init__(self, config_manager: ConfigManager, solr_backend: SearchBackend) -> None:
        super().__init__()
        self.config_manager = config_manager
        self.solr_backend = solr_backend
        self.geo_field = "long_lat"
        self.default_coordinates: List[float] = []
        self.height = 320
        self.selected: List[str] = []

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        ini, section = split_settings(settings, 2, ["searches", "MapSelection"])
        config = self.config_manager.get(ini).section(section)
        self.geo_field = config.get("geoField", "long_lat")
        self.default_coordinates = [
            float(value) for value in config.get_list("default_coordinates")
        ]
        self.height = config.get_int("height", 320)

    def init(self, params: Any, request: Any) -> None:
        prefix = f"{self.geo_field}:"
        filters = params.get_filters() if params is not None else []
        self.selected = [item[len(prefix):] for item in filters if item.startswith(prefix)]
        if not self.selected:
            value = request_value(request, "bbox")
            if value:
                self.selected = [value]

    def get_selected_coordinates(self) -> List[float]:
        """Coordinates from the active bounding-box filter, else the defaults."""
        for value in self.selected:
            numbers = re.findall(r"-?\d+(?:\.\d+)?", value)
            if len(numbers) == 4:
                return [float(number) for number in numbers]
        return list(self.default_coordinates)

    def get_map_settings(self) -> Dict[str, Any]:
        return {
            "geo_field": self.geo_field,
            "coordinates": self.get_selected_coordinates(),
            "height": self.height,
        }

    def get_data(self) -> Dict[str, Any]:
        return {"map": self.get_map_settings()}

    def get_geo_results(self, limit: int = 100) -> List[Dict[str, Any]]:
        """Records carrying the geographic field for the current query."""
        if self.results is None:
            return []
        params = self.results.get_params()
        collection = self.solr_backend.search(
            params.get_query(), 0, limit, {"filters": params.get_filters()}
        )
        return [record for record in collection.records if record.get(self.geo_field)]
