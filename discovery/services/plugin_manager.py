"""
Plugin Manager Module

Scoped registries for families of pluggable services (authentication
strategies, recommendation modules, search objects, AJAX handlers).
"""

from typing import Any, Callable, List, Optional

from ..exceptions import ResolutionError
from .service_registry import ServiceRegistry

Initializer = Callable[[Any, ServiceRegistry], None]
FallbackFactory = Callable[[ServiceRegistry, str], Optional[Any]]


class PluginManager(ServiceRegistry):
    """
    A registry whose plugin factories receive the parent registry.

    Plugin names are case-insensitive. Every newly created plugin is checked
    against ``instance_of`` (when set) and passed through the registered
    initializers. The manager shares the parent's lock so that resolution
    across both registries cannot deadlock.
    """

    instance_of: Optional[type] = None
    shared_by_default = True

    def __init__(self, parent: ServiceRegistry) -> None:
        super().__init__()
        self.parent = parent
        self._lock = parent._lock
        self._initializers: List[Initializer] = []
        self._fallback_factory: Optional[FallbackFactory] = None

    def _canonical_name(self, service_name: str) -> str:
        return service_name.lower()

    def register_factory(
        self,
        service_name: str,
        factory_func: Callable[[ServiceRegistry], Any],
        shared: Optional[bool] = None,
    ) -> None:
        """
        Register a plugin factory.

        Args:
            service_name (str): Plugin name (case-insensitive)
            factory_func (callable): Function taking the parent registry
            shared (bool): Defaults to the manager's ``shared_by_default``
        """
        if shared is None:
            shared = self.shared_by_default
        super().register_factory(service_name, factory_func, shared)

    def add_initializer(self, initializer: Initializer) -> None:
        """Run ``initializer(plugin, parent)`` on every plugin created from now on."""
        self._initializers.append(initializer)

    def set_fallback_factory(self, factory: FallbackFactory) -> None:
        """Build plugins for names that were never registered explicitly."""
        self._fallback_factory = factory

    def _factory_argument(self) -> ServiceRegistry:
        return self.parent

    def _create(self, name: str) -> Any:
        return self._prepare(name, super()._create(name))

    def _get_unregistered(self, name: str) -> Any:
        if self._fallback_factory is not None:
            plugin = self._fallback_factory(self.parent, name)
            if plugin is not None:
                return self._prepare(name, plugin)
        raise ResolutionError(
            f"Plugin '{name}' not registered with {type(self).__name__}"
        )

    def _prepare(self, name: str, plugin: Any) -> Any:
        self.validate_plugin(name, plugin)
        for initializer in self._initializers:
            initializer(plugin, self.parent)
        return plugin

    def validate_plugin(self, name: str, plugin: Any) -> None:
        """Reject plugins that do not implement the expected type."""
        if self.instance_of is not None and not isinstance(plugin, self.instance_of):
            raise ResolutionError(
                f"Plugin '{name}' of type {type(plugin).__name__} does not "
                f"implement {self.instance_of.__name__}"
            )
