"""Search runner: request arguments in, processed results out."""

import logging
from typing import Any, Callable, Mapping, Optional

from .params import SearchParams
from .results import SearchResults

logger = logging.getLogger(__name__)

SetupCallback = Callable[["SearchRunner", SearchParams, str], None]


class SearchRunner:
    def __init__(self, results_manager: Any) -> None:
        self.results_manager = results_manager

    def run(
        self,
        request: Mapping[str, Any],
        search_class_id: str = "Solr",
        setup_callback: Optional[SetupCallback] = None,
    ) -> SearchResults:
        """
        Run a search for ``search_class_id`` configured from ``request``.

        ``setup_callback(runner, params, search_class_id)`` may adjust the
        parameters before the search is executed.
        """
        results = self.results_manager.get(search_class_id)
        params = results.get_params()
        params.init_from_request(request)
        if setup_callback is not None:
            setup_callback(self, params, search_class_id)
        logger.debug(f"Running {search_class_id} search for '{params.get_display_query()}'")
        results.perform_and_process_search()
        return results

    def supports(self, search_class_id: str) -> bool:
        """Whether a results object can be built for ``search_class_id``."""
        return self.results_manager.has(search_class_id)
