"""Plugin manager for AJAX handlers."""

from ..services.plugin_manager import PluginManager
from ..services.service_registry import ServiceRegistry
from .base import AbstractBase
from .keep_alive import KeepAliveFactory


class AjaxHandlerPluginManager(PluginManager):
    """AJAX handlers by method name."""

    instance_of = AbstractBase

    def __init__(self, parent: ServiceRegistry) -> None:
        super().__init__(parent)
        keep_alive = KeepAliveFactory()
        self.register_factory("keepAlive", lambda registry: keep_alive(registry, "keepAlive"))
