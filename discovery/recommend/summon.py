"""Recommendation modules fed by Summon response details."""

from typing import Any, Dict, List, Optional

from .base import RecommendInterface, request_value, split_settings


class AbstractSummonRecommend(RecommendInterface):
    """
    Reads one key of the Summon backend details.

    When the main search ran against Summon its details are reused;
    otherwise a Summon search for the same query is run.
    """

    details_key = ""

    def __init__(self, results_manager: Any) -> None:
        super().__init__()
        self.results_manager = results_manager
        self.lookfor = ""
        self.items: List[Dict[str, Any]] = []

    def init(self, params: Any, request: Any) -> None:
        self.lookfor = request_value(request, "lookfor")

    def _summon_results(self, results: Any) -> Optional[Any]:
        if results is not None and results.get_backend_id() == "Summon":
            return results
        if not self.results_manager.has("Summon"):
            return None
        summon = self.results_manager.get("Summon")
        summon.get_params().set_basic_search(self.lookfor)
        return summon

    def process(self, results: Any) -> None:
        super().process(results)
        if not self.lookfor and results is not None:
            self.lookfor = results.get_params().get_display_query()
        self.items = []
        summon = self._summon_results(results)
        if summon is None:
            return
        self.items = list(summon.get_backend_details().get(self.details_key) or [])

    def get_results(self) -> List[Dict[str, Any]]:
        return list(self.items)

    def get_data(self) -> Dict[str, Any]:
        return {"results": self.get_results()}


class SummonBestBets(AbstractSummonRecommend):
    details_key = "bestBets"


class SummonDatabases(AbstractSummonRecommend):
    details_key = "databases"


class SummonTopics(AbstractSummonRecommend):
    """Topic explorer entries; settings: ``limit`` (default 1)."""

    details_key = "topicRecommendations"

    def __init__(self, results_manager: Any) -> None:
        super().__init__(results_manager)
        self.limit = 1

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        self.limit = int(split_settings(settings, 1, ["1"])[0])

    def get_results(self) -> List[Dict[str, Any]]:
        return self.items[:self.limit]
