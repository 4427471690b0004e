"""Plugin manager for authentication strategies."""

from typing import Any

from ..services.plugin_manager import PluginManager
from ..services.service_registry import ServiceRegistry
from . import factory
from .base import AbstractBase, HttpServiceAwareMixin


def inject_dependencies(plugin: Any, parent: ServiceRegistry) -> None:
    """Give every strategy the main configuration, and the HTTP service if it wants it."""
    if isinstance(plugin, HttpServiceAwareMixin):
        plugin.set_http_service(parent.get("http"))
    plugin.set_config(parent.get("config_manager").get("config"))


class AuthPluginManager(PluginManager):
    """Authentication strategies by name (ILS, MultiILS, ChoiceAuth, ...)."""

    instance_of = AbstractBase

    def __init__(self, parent: ServiceRegistry) -> None:
        super().__init__(parent)
        self.register_factory("ChoiceAuth", factory.get_choice_auth)
        self.register_factory("Facebook", factory.get_facebook)
        self.register_factory("ILS", factory.get_ils)
        self.register_factory("MultiAuth", factory.get_multi_auth)
        self.register_factory("MultiILS", factory.get_multi_ils)
        self.register_factory("Shibboleth", factory.get_shibboleth)
        self.add_initializer(inject_dependencies)
