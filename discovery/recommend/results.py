"""
Search Result Recommendation Modules

Modules that run a secondary search and show its records next to the main
results.
"""

import logging
from typing import Any, Dict, List

from ..exceptions import AppError
from ..search.runner import SearchRunner
from .base import RecommendInterface, request_value, split_settings

logger = logging.getLogger(__name__)


class AbstractSearchObjectResults(RecommendInterface):
    """
    Runs the user's query against another search class.

    Settings: ``limit:heading`` (default ``5``).
    """

    search_class_id = "Solr"
    default_limit = 5

    def __init__(self, runner: SearchRunner) -> None:
        super().__init__()
        self.runner = runner
        self.limit = self.default_limit
        self.heading = ""
        self.lookfor = ""
        self.secondary = None

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        limit, heading = split_settings(settings, 2, [str(self.default_limit), ""])
        self.limit = int(limit)
        self.heading = heading

    def init(self, params: Any, request: Any) -> None:
        self.lookfor = request_value(request, "lookfor")

    def process(self, results: Any) -> None:
        super().process(results)
        self.secondary = None
        if not self.lookfor:
            return
        if not self.runner.supports(self.search_class_id):
            logger.debug(f"No {self.search_class_id} backend; skipping {type(self).__name__}")
            return

        def setup(runner, params, search_class_id):
            params.set_limit(self.limit)

        self.secondary = self.runner.run({"lookfor": self.lookfor}, self.search_class_id, setup)

    def get_heading(self) -> str:
        return self.heading

    def get_results(self) -> List[Dict[str, Any]]:
        return self.secondary.get_results() if self.secondary is not None else []

    def get_data(self) -> Dict[str, Any]:
        return {"heading": self.heading, "results": self.get_results()}


class CatalogResults(AbstractSearchObjectResults):
    search_class_id = "Solr"


class SummonResults(AbstractSearchObjectResults):
    search_class_id = "Summon"


class WebResults(AbstractSearchObjectResults):
    search_class_id = "SolrWeb"


class RandomRecommend(RecommendInterface):
    """
    Random records from a backend.

    Settings: ``backend:limit:mode`` (default ``Solr:10:retain``). In
    ``retain`` mode the current query and filters are reused; ``disregard``
    draws from the whole index.
    """

    def __init__(self, search_service: Any, params_manager: Any) -> None:
        super().__init__()
        self.search_service = search_service
        self.params_manager = params_manager
        self.backend = "Solr"
        self.limit = 10
        self.mode = "retain"
        self.params = None
        self.records: List[Dict[str, Any]] = []

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        backend, limit, mode = split_settings(settings, 3, ["Solr", "10", "retain"])
        self.backend = backend
        self.limit = int(limit)
        self.mode = mode.lower()

    def init(self, params: Any, request: Any) -> None:
        self.params = self.params_manager.get(self.backend)
        if self.mode == "retain" and params is not None:
            self.params.set_basic_search(params.lookfor, params.search_type)
            for item in params.get_filters():
                self.params.add_filter(item)

    def process(self, results: Any) -> None:
        super().process(results)
        if self.params is None:
            self.params = self.params_manager.get(self.backend)
        collection = self.search_service.random(
            self.backend, self.params.get_query(), self.limit, self.params.get_backend_parameters()
        )
        self.records = collection.records

    def get_results(self) -> List[Dict[str, Any]]:
        return list(self.records)

    def get_data(self) -> Dict[str, Any]:
        return {"results": self.get_results()}


class AuthorityRecommend(RecommendInterface):
    """
    Authority records matching the query.

    Settings: ``backend:limit`` (default ``SolrAuth:5``). Backend failures
    are logged and produce no recommendations.
    """

    def __init__(self, results_manager: Any) -> None:
        super().__init__()
        self.results_manager = results_manager
        self.backend = "SolrAuth"
        self.limit = 5
        self.lookfor = ""
        self.recommendations: List[Dict[str, Any]] = []

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        backend, limit = split_settings(settings, 2, ["SolrAuth", "5"])
        self.backend = backend
        self.limit = int(limit)

    def init(self, params: Any, request: Any) -> None:
        self.lookfor = request_value(request, "lookfor")

    def process(self, results: Any) -> None:
        super().process(results)
        self.recommendations = []
        if not self.lookfor:
            return
        try:
            authority = self.results_manager.get(self.backend)
            params = authority.get_params()
            params.set_basic_search(self.lookfor, "heading")
            params.set_limit(self.limit)
            self.recommendations = authority.get_results()
        except AppError as e:
            logger.warning(f"Authority lookup on {self.backend} failed: {e.message}")

    def get_recommendations(self) -> List[Dict[str, Any]]:
        return list(self.recommendations)

    def get_data(self) -> Dict[str, Any]:
        return {"recommendations": self.get_recommendations()}
