"""Search layer: backends, events, parameters, results and helpers."""

from .backend import BackendManager, MemoryBackend, RecordCollection, SearchBackend
from .events import EventManager, SharedEventManager
from .facet_helper import HierarchicalFacetHelper
from .params import SearchParams
from .plugin_managers import ParamsPluginManager, ResultsPluginManager
from .results import SearchResults
from .runner import SearchRunner
from .search_tabs import SearchTabsHelper
from .service import SearchService

__all__ = [
    "BackendManager",
    "EventManager",
    "HierarchicalFacetHelper",
    "MemoryBackend",
    "ParamsPluginManager",
    "RecordCollection",
    "ResultsPluginManager",
    "SearchBackend",
    "SearchParams",
    "SearchResults",
    "SearchRunner",
    "SearchService",
    "SearchTabsHelper",
    "SharedEventManager",
]
