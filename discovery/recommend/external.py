"""
External Content Recommendation Modules

Modules that fetch supplementary content from third-party services
(Wikipedia, DPLA, Europeana, WorldCat Identities).
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..connection.worldcat import WorldCatUtils
from .base import RecommendInterface, request_value, split_settings

logger = logging.getLogger(__name__)

WIKIPEDIA_SUMMARY_URL = "https://{lang}.wikipedia.org/api/rest_v1/page/summary/{title}"
DPLA_API_URL = "https://api.dp.la/v2/items"
EUROPEANA_API_URL = "https://api.europeana.eu/record/v2/search.json"


class AuthorInfo(RecommendInterface):
    """
    Biographical information about the author being searched.

    Args:
        results_manager: Search results plugin manager
        client (requests.Session): HTTP client for the content sources
        sources (str): Comma-separated sources from ``[Content] authors``;
            only ``wikipedia`` is supported

    Settings: ``language`` (default ``en``).
    """

    def __init__(self, results_manager: Any, client: requests.Session, sources: str = "") -> None:
        super().__init__()
        self.results_manager = results_manager
        self.client = client
        self.sources = [s.strip().lower() for s in (sources or "").split(",") if s.strip()]
        self.lang = "en"
        self.author = ""
        self.info: Dict[str, Any] = {}

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        self.lang = split_settings(settings, 1, ["en"])[0]

    def init(self, params: Any, request: Any) -> None:
        self.author = request_value(request, "author") or request_value(request, "lookfor")

    def process(self, results: Any) -> None:
        super().process(results)
        self.info = {}
        if self.author and "wikipedia" in self.sources:
            self.info = self.get_wikipedia(self.author)

    def get_wikipedia(self, author: str) -> Dict[str, Any]:
        url = WIKIPEDIA_SUMMARY_URL.format(lang=self.lang, title=quote(author.replace(" ", "_")))
        try:
            response = self.client.get(url)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Wikipedia lookup for '{author}' failed: {e}")
            return {}
        return {
            "name": data.get("title", author),
            "description": data.get("extract", ""),
            "image": (data.get("thumbnail") or {}).get("source"),
            "url": ((data.get("content_urls") or {}).get("desktop") or {}).get("page"),
        }

    def get_author_info(self) -> Dict[str, Any]:
        return dict(self.info)

    def get_author_results(self, backend: str = "Solr") -> Optional[Any]:
        """Results object for an author search on the same name."""
        if not self.author or not self.results_manager.has(backend):
            return None
        results = self.results_manager.get(backend)
        results.get_params().set_basic_search(self.author, "author")
        return results

    def get_data(self) -> Dict[str, Any]:
        results = self.get_author_results()
        return {
            "info": self.get_author_info(),
            "results": results.get_results() if results is not None else [],
        }


class DPLATerms(RecommendInterface):
    """
    Related items from the Digital Public Library of America.

    Settings: ``limit`` (default 5). The API key is mandatory and checked
    when the module is constructed.
    """

    def __init__(self, api_key: str, client: requests.Session) -> None:
        super().__init__()
        self.api_key = api_key
        self.client = client
        self.limit = 5
        self.items: List[Dict[str, Any]] = []

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        self.limit = int(split_settings(settings, 1, ["5"])[0])

    def process(self, results: Any) -> None:
        super().process(results)
        self.items = []
        lookfor = results.get_params().get_display_query() if results is not None else ""
        if not lookfor:
            return
        params = {"api_key": self.api_key, "q": lookfor, "page_size": self.limit}
        try:
            response = self.client.get(DPLA_API_URL, params=params)
            response.raise_for_status()
            docs = response.json().get("docs", [])
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"DPLA request failed: {e}")
            return
        for doc in docs:
            resource = doc.get("sourceResource", {})
            title = resource.get("title", "")
            self.items.append({
                "title": title[0] if isinstance(title, list) and title else title,
                "link": doc.get("isShownAt", ""),
                "provider": (doc.get("provider") or {}).get("name", ""),
            })

    def get_results(self) -> List[Dict[str, Any]]:
        return list(self.items)

    def get_data(self) -> Dict[str, Any]:
        return {"results": self.get_results()}


class EuropeanaResults(RecommendInterface):
    """
    Related items from Europeana.

    Settings: ``limit:url`` (default ``5``). Without an API key the module
    produces no results.
    """

    def __init__(self, api_key: Optional[str], client: requests.Session) -> None:
        super().__init__()
        self.api_key = api_key
        self.client = client
        self.limit = 5
        self.url = EUROPEANA_API_URL
        self.lookfor = ""
        self.items: List[Dict[str, Any]] = []

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        limit, url = split_settings(settings, 2, ["5", EUROPEANA_API_URL])
        self.limit = int(limit)
        self.url = url

    def init(self, params: Any, request: Any) -> None:
        self.lookfor = request_value(request, "lookfor")

    def process(self, results: Any) -> None:
        super().process(results)
        self.items = []
        if not self.api_key or not self.lookfor:
            return
        params = {"wskey": self.api_key, "query": self.lookfor, "rows": self.limit}
        try:
            response = self.client.get(self.url, params=params)
            response.raise_for_status()
            records = response.json().get("items", [])
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Europeana request failed: {e}")
            return
        for record in records:
            title = record.get("title") or [""]
            self.items.append({
                "title": title[0] if isinstance(title, list) else title,
                "link": record.get("guid", ""),
            })

    def get_results(self) -> List[Dict[str, Any]]:
        return list(self.items)

    def get_data(self) -> Dict[str, Any]:
        return {"results": self.get_results()}


class WorldCatIdentities(RecommendInterface):
    """Related subject headings from WorldCat Identities; settings: ``limit`` (default 5)."""

    def __init__(self, worldcat_utils: WorldCatUtils) -> None:
        super().__init__()
        self.worldcat_utils = worldcat_utils
        self.limit = 5
        self.lookfor = ""
        self.identities: Dict[str, List[str]] = {}

    def set_config(self, settings: str) -> None:
        super().set_config(settings)
        self.limit = int(split_settings(settings, 1, ["5"])[0])

    def init(self, params: Any, request: Any) -> None:
        self.lookfor = request_value(request, "lookfor")

    def process(self, results: Any) -> None:
        super().process(results)
        self.identities = {}
        if self.lookfor:
            self.identities = self.worldcat_utils.get_related_identities(self.lookfor, self.limit)

    def get_identities(self) -> Dict[str, List[str]]:
        return dict(self.identities)

    def get_data(self) -> Dict[str, Any]:
        return {"identities": self.get_identities()}
