"""
Service Wiring Module

The one place where service identifiers are mapped to their factories.
"""

import logging
from typing import Any, Mapping

from flask import request

from ..ajax.plugin_manager import AjaxHandlerPluginManager
from ..auth import factory as auth_factory
from ..auth.manager import AuthManager
from ..auth.plugin_manager import AuthPluginManager
from ..ils.connection import Connection
from ..ils.drivers import create_driver
from ..recommend.plugin_manager import RecommendPluginManager
from ..search.backend import BackendManager, MemoryBackend
from ..search.events import SharedEventManager
from ..search.facet_helper import HierarchicalFacetHelper
from ..search.plugin_managers import ParamsPluginManager, ResultsPluginManager
from ..search.runner import SearchRunner
from ..settings.account_capabilities import AccountCapabilities
from ..settings.reader import ConfigManager
from . import factory
from .cache import CacheManager
from .db import AdapterFactory
from .service_registry import ServiceRegistry
from .session import SessionManager

logger = logging.getLogger(__name__)

DEFAULT_ILS_DRIVER = "NoILS"


def _config(registry: ServiceRegistry):
    return registry.get("config_manager").get("config")


def _backend_manager(registry: ServiceRegistry) -> BackendManager:
    """Backends listed in ``[Index] backends`` (default ``Solr``), answering resolve events."""
    manager = BackendManager(registry)
    names = _config(registry).section("Index").get_list("backends") or ["Solr"]
    for name in names:
        manager.register_factory(name, lambda parent, name=name: MemoryBackend(name))
    manager.attach_shared_listeners(registry.get("search.shared_events"))
    return manager


def _ils_connection(registry: ServiceRegistry) -> Connection:
    config = _config(registry)
    driver_name = config.section("Catalog").get("driver") or DEFAULT_ILS_DRIVER
    return Connection(create_driver(driver_name, config))


def register_services(registry: ServiceRegistry, settings: Mapping[str, Any]) -> None:
    """
    Register every application service with ``registry``.

    Args:
        registry (ServiceRegistry): Registry owned by the application
        settings (dict): Application settings (see ``Config.settings``)
    """
    registry.register("app_settings", dict(settings))
    registry.register("request", request)

    # Configuration
    registry.register_factory(
        "config_manager",
        lambda r: ConfigManager(settings["CONFIG_DIR"], settings["LOCAL_OVERRIDE_DIR"]),
    )
    registry.register_factory(
        "account_capabilities", lambda r: AccountCapabilities(_config(r))
    )

    # Infrastructure
    registry.register_factory(
        "cache_manager", lambda r: CacheManager(_config(r), settings["CACHE_DIR"])
    )
    registry.register_factory("db.adapter_factory", lambda r: AdapterFactory(_config(r)))
    registry.register_factory("db_adapter", factory.get_db_adapter)
    registry.register_factory("http", factory.get_http)
    registry.register_factory("proxy_config", factory.get_proxy_config)
    registry.register_factory("session_manager", lambda r: SessionManager())
    registry.register_factory("tags", factory.get_tags)
    registry.register_factory("translator", factory.get_translator)
    registry.register_factory("worldcat_utils", factory.get_worldcat_utils)

    # Search
    registry.register_factory("search.shared_events", lambda r: SharedEventManager())
    registry.register_factory("search.backend_manager", _backend_manager)
    registry.register_factory("search_service", factory.get_search_service)
    registry.register_factory("search.params_manager", ParamsPluginManager)
    registry.register_factory("search.results_manager", ResultsPluginManager)
    registry.register_factory(
        "search.runner", lambda r: SearchRunner(r.get("search.results_manager"))
    )
    registry.register_factory("search.facet_helper", lambda r: HierarchicalFacetHelper())
    registry.register_factory("search_tabs_helper", factory.get_search_tabs_helper)

    # Authentication and catalog
    registry.register_factory("ils.connection", _ils_connection)
    registry.register_factory("auth.plugin_manager", AuthPluginManager)
    registry.register_factory(
        "auth.manager",
        lambda r: AuthManager(_config(r), r.get("session_manager"), r.get("auth.plugin_manager")),
    )
    registry.register_factory("auth.ils_authenticator", auth_factory.get_ils_authenticator)

    # Plugin families
    registry.register_factory("recommend.plugin_manager", RecommendPluginManager)
    registry.register_factory("ajax.plugin_manager", AjaxHandlerPluginManager)

    logger.debug(f"Registered {len(registry.get_registered_services())} services")


def initialize_services(registry: ServiceRegistry) -> None:
    """
    Startup steps that must run once per application.

    Outside development the lazy proxy target directory is prepared here.
    """
    settings = registry.get("app_settings")
    if settings.get("APPLICATION_ENV") != "development":
        registry.get("proxy_config").install()
