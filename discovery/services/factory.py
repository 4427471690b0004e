"""
Factory for top-level services.

Each function takes the service registry, resolves the dependencies it
needs by identifier, and returns the constructed service.
"""

import logging
import os
from typing import Any, Dict, Optional

from ..connection.worldcat import WorldCatUtils
from ..exceptions import BadMethodCallError
from ..i18n.extended_ini import ExtendedIni
from ..i18n.translator import Translator, TranslatorFactory
from ..search.events import EventManager
from ..search.search_tabs import SearchTabsHelper
from ..search.service import SearchService
from ..tags import DEFAULT_MAX_LENGTH, Tags
from .http_service import HttpService
from .lazy import ProxyConfig
from .service_registry import ServiceRegistry

logger = logging.getLogger(__name__)


def _main_config(registry: ServiceRegistry):
    return registry.get("config_manager").get("config")


def get_db_adapter(registry: ServiceRegistry):
    """Construct the database adapter (a SQLAlchemy engine)."""
    return registry.get("db.adapter_factory").get_adapter()


def get_http(registry: ServiceRegistry) -> HttpService:
    """
    Construct the HTTP service.

    Proxy options are only passed on when ``[Proxy] host`` is set; port and
    type are added only alongside a host.
    """
    config = _main_config(registry)
    options: Dict[str, Any] = {}
    proxy = config.section("Proxy")
    if proxy.get("host"):
        options["proxy_host"] = proxy["host"]
        if proxy.get("port"):
            options["proxy_port"] = proxy["port"]
        if proxy.get("type"):
            options["proxy_type"] = proxy["type"]
    defaults = config.section("Http").to_dict() if config.has_section("Http") else {}
    return HttpService(options, defaults)


def get_proxy_config(registry: ServiceRegistry) -> ProxyConfig:
    """
    Construct the lazy proxy configuration.

    Only the target directory is set here; preparing it is a startup step
    (see ``wiring.initialize_services``).
    """
    cache_dir = registry.get("cache_manager").get_cache_dir()
    config = ProxyConfig()
    config.set_proxies_target_dir(os.path.join(cache_dir, "objects"))
    return config


def get_search_service(registry: ServiceRegistry) -> SearchService:
    # Backends answer resolve events once their manager exists
    registry.get("search.backend_manager")
    return SearchService(EventManager(registry.get("search.shared_events")))


def get_search_tabs_helper(registry: ServiceRegistry) -> SearchTabsHelper:
    """Construct the search tabs helper from the [SearchTabs*] sections."""
    config = _main_config(registry)
    tab_config = config.section("SearchTabs").to_dict()
    filter_config = config.section("SearchTabsFilters").to_dict()
    permission_config = config.section("SearchTabsPermissions").to_dict()
    return SearchTabsHelper(
        registry.get("search.results_manager"),
        tab_config,
        filter_config,
        registry.get("request"),
        permission_config,
    )


def get_tags(registry: ServiceRegistry) -> Tags:
    """Construct the tag parser; ``[Social] max_tag_length`` defaults to 64."""
    max_length = _main_config(registry).section("Social").get_int(
        "max_tag_length", DEFAULT_MAX_LENGTH
    )
    return Tags(max_length)


def get_translator(registry: ServiceRegistry) -> Translator:
    """
    Construct the translator.

    When translation is disabled the base translator has no loader plugin
    manager and is returned as-is. Otherwise the ExtendedIni loader is
    registered and the language cache attached; a cache that cannot be
    attached leaves the translator uncached.
    """
    translator = TranslatorFactory().create_service(registry)

    try:
        plugin_manager = translator.get_plugin_manager()
    except BadMethodCallError:
        return translator

    settings = registry.get("app_settings")
    language = _main_config(registry).section("Site").get("language") or "en"
    fallback_locales = "en" if language == "en" else [language, "en"]
    path_stack = [
        settings["LANGUAGES_DIR"],
        os.path.join(settings["LOCAL_OVERRIDE_DIR"], "languages"),
    ]
    plugin_manager.register(
        Translator.loader_name, ExtendedIni(path_stack, fallback_locales)
    )

    try:
        translator.set_cache(registry.get("cache_manager").get_cache("language"))
    except Exception as e:
        # Translation works without a cache
        logger.debug(f"Problem loading cache: {type(e).__name__} exception: {e}")

    return translator


def _server_address(request: Any) -> Optional[str]:
    try:
        return request.environ.get("SERVER_NAME")
    except RuntimeError:
        # Outside request context
        return None


def get_worldcat_utils(registry: ServiceRegistry) -> WorldCatUtils:
    """
    Construct the WorldCat helper in silent mode.

    The helper is shared, so the server address is looked up from the
    current request on every call.
    """
    config = _main_config(registry)
    worldcat = config.section("WorldCat") if config.has_section("WorldCat") else None
    client = registry.get("http").create_client()
    request = registry.get("request")
    return WorldCatUtils(worldcat, client, True, lambda: _server_address(request))
