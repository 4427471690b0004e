"""Plugin managers for search parameter and result objects."""

from typing import Optional

from ..services.plugin_manager import PluginManager
from ..services.service_registry import ServiceRegistry
from .params import SearchParams
from .results import SearchResults


class _BackendScopedManager(PluginManager):
    """Plugins named after backend identifiers; a new object per request."""

    shared_by_default = False

    def __init__(self, parent: ServiceRegistry) -> None:
        super().__init__(parent)
        self.set_fallback_factory(self._build_for_backend)

    def _canonical_name(self, service_name: str) -> str:
        return service_name

    def has(self, service_name: str) -> bool:
        """Registered explicitly, or buildable for a known backend."""
        if super().has(service_name):
            return True
        return self.parent.get("search.backend_manager").has(service_name)

    def _build_for_backend(self, parent: ServiceRegistry, name: str):
        if not parent.get("search.backend_manager").has(name):
            return None
        return self.build(parent, name)

    def build(self, parent: ServiceRegistry, name: str):
        raise NotImplementedError


class ParamsPluginManager(_BackendScopedManager):
    instance_of = SearchParams

    def build(self, parent: ServiceRegistry, name: str) -> Optional[SearchParams]:
        return SearchParams(name, parent.get("config_manager"))


class ResultsPluginManager(_BackendScopedManager):
    instance_of = SearchResults

    def build(self, parent: ServiceRegistry, name: str) -> Optional[SearchResults]:
        params = parent.get("search.params_manager").get(name)
        return SearchResults(params, parent.get("search_service"))
