"""
Unit tests for the top-level service factories

Each test resolves a service from a wired registry and checks how the
factory turned configuration into constructor arguments.
"""

import logging
import os
from unittest.mock import MagicMock

import pytest
import requests
from discovery.connection.worldcat import WorldCatUtils
from discovery.exceptions import BackendError
from discovery.i18n.extended_ini import ExtendedIni
from discovery.i18n.translator import DisabledTranslator, Translator
from discovery.search.service import SearchService
from discovery.search.search_tabs import SearchTabsHelper
from discovery.services.http_service import HttpService
from discovery.services.lazy import ProxyConfig
from discovery.services.service_registry import ServiceRegistry
from discovery.services.wiring import register_services
from discovery.settings.reader import ConfigSection
from discovery.tags import Tags


@pytest.mark.unit
class TestTagsFactory:
    def test_default_max_length(self, registry):
        tags = registry.get("tags")
        assert isinstance(tags, Tags)
        assert tags.max_length == 64

    def test_configured_max_length(self, registry, set_config):
        set_config({"Social": {"max_tag_length": "12"}})
        assert registry.get("tags").max_length == 12


@pytest.mark.unit
class TestHttpFactory:
    def test_no_proxy_options_by_default(self, registry):
        http = registry.get("http")
        assert isinstance(http, HttpService)
        assert http.proxy_config == {}
        assert http.defaults == {}

    def test_proxy_options_need_host(self, registry, set_config):
        set_config({"Proxy": {"port": "8000", "type": "socks5"}})
        assert registry.get("http").proxy_config == {}

    def test_proxy_options_with_host(self, registry, set_config):
        set_config(
            {
                "Proxy": {"host": "proxy.example.edu", "port": "8000", "type": "socks5"},
                "Http": {"timeout": "5"},
            }
        )
        http = registry.get("http")
        assert http.proxy_config == {
            "proxy_host": "proxy.example.edu",
            "proxy_port": "8000",
            "proxy_type": "socks5",
        }
        assert http.defaults == {"timeout": "5"}
        assert http.get_proxies()["https"] == "socks5h://proxy.example.edu:8000"

    def test_client_carries_defaults(self, registry, set_config):
        set_config({"Http": {"timeout": "5", "user_agent": "Discovery"}})
        client = registry.get("http").create_client()
        assert client.timeout == 5.0
        assert client.headers["User-Agent"] == "Discovery"


@pytest.mark.unit
class TestInfrastructureFactories:
    def test_proxy_config_targets_cache_objects(self, registry, test_config):
        proxy_config = registry.get("proxy_config")
        assert isinstance(proxy_config, ProxyConfig)
        assert proxy_config.proxies_target_dir == os.path.join(test_config.CACHE_DIR, "objects")
        # Preparing the directory is a startup step, not a side effect of the getter
        assert proxy_config.installed is False
        assert not os.path.exists(proxy_config.proxies_target_dir)

    def test_db_adapter_defaults_to_in_memory_sqlite(self, registry):
        engine = registry.get("db_adapter")
        assert str(engine.url) == "sqlite://"
        assert registry.get("db_adapter") is engine

    def test_db_adapter_uses_configured_url(self, registry, set_config, tmp_path):
        url = f"sqlite:///{tmp_path / 'discovery.db'}"
        set_config({"Database": {"database": url}})
        assert str(registry.get("db_adapter").url) == url

    def test_shared_services_are_identical(self, registry):
        for name in ("http", "tags", "translator", "search_service", "config_manager"):
            assert registry.get(name) is registry.get(name)

    def test_search_service_resolves_backends(self, registry):
        service = registry.get("search_service")
        assert isinstance(service, SearchService)
        assert service.resolve("Solr").identifier == "Solr"
        with pytest.raises(BackendError):
            service.resolve("Unknown")

    def test_search_tabs_helper_defaults(self, registry):
        helper = registry.get("search_tabs_helper")
        assert isinstance(helper, SearchTabsHelper)
        assert helper.tab_config == {}
        assert helper.filter_config == {}
        assert helper.permission_config == {}

    def test_search_tabs_helper_configured(self, registry, set_config):
        set_config(
            {
                "SearchTabs": {"Solr": "Catalog", "Solr:books": "Books"},
                "SearchTabsFilters": {"Solr:books": 'format:"Book"'},
            }
        )
        helper = registry.get("search_tabs_helper")
        assert helper.tab_config == {"Solr": "Catalog", "Solr:books": "Books"}
        assert helper.get_tab_filters("Solr:books") == ['format:"Book"']

    def test_worldcat_utils_without_config(self, registry):
        utils = registry.get("worldcat_utils")
        assert isinstance(utils, WorldCatUtils)
        assert dict(utils.config) == {}
        assert utils.silent is True
        assert utils.get_ip() is None

    def test_worldcat_utils_with_config(self, registry, set_config):
        set_config({"WorldCat": {"id": "discovery"}})
        assert registry.get("worldcat_utils").config["id"] == "discovery"


@pytest.mark.unit
class TestTranslatorFactory:
    def test_registers_extended_ini_loader(self, registry, test_config):
        translator = registry.get("translator")
        assert isinstance(translator, Translator)
        loader = translator.get_plugin_manager().get("ExtendedIni")
        assert isinstance(loader, ExtendedIni)
        assert loader.path_stack == [
            test_config.LANGUAGES_DIR,
            os.path.join(test_config.LOCAL_OVERRIDE_DIR, "languages"),
        ]
        assert loader.fallback_locales == ["en"]
        assert translator.get_cache() is not None

    def test_fallback_locales_for_other_language(self, registry, set_config):
        set_config({"Site": {"language": "de"}})
        loader = registry.get("translator").get_plugin_manager().get("ExtendedIni")
        assert loader.fallback_locales == ["de", "en"]

    def test_cache_failure_is_not_fatal(self, registry, set_config, test_config, caplog):
        with open(os.path.join(test_config.LANGUAGES_DIR, "en.ini"), "w") as handle:
            handle.write('Search = "Find"\n')
        set_config({"Cache": {"disabled": "true"}})

        with caplog.at_level(logging.DEBUG, logger="discovery.services.factory"):
            translator = registry.get("translator")

        assert translator.get_cache() is None
        assert translator.translate("Search") == "Find"
        assert "Problem loading cache: CacheError exception" in caplog.text

    def test_disabled_translation(self, test_config):
        registry = ServiceRegistry()
        register_services(registry, dict(test_config.settings(), I18N_ENABLED=False))
        translator = registry.get("translator")
        assert isinstance(translator, DisabledTranslator)
        assert translator.get_cache() is None
        assert translator.translate("Search") == "Search"


@pytest.mark.unit
class TestWorldCatUtils:
    """Test the shared WorldCat helper"""

    def test_server_address_follows_current_request(self, app):
        utils = app.service_registry.get("worldcat_utils")
        with app.test_request_context("/", base_url="http://one.example.org"):
            assert utils.get_ip() == "one.example.org"
        with app.test_request_context("/", base_url="http://two.example.org"):
            assert utils.get_ip() == "two.example.org"
        assert app.service_registry.get("worldcat_utils") is utils

    def test_xisbn_editions(self):
        client = MagicMock()
        client.get.return_value.text = (
            '{"stat": "ok", "list": [{"isbn": ["0596158068"]}, {"isbn": ["9780596158064"]}]}'
        )
        utils = WorldCatUtils(ConfigSection({"id": "discovery"}), client, True, lambda: "lib.example.org")

        assert utils.get_xisbn("0596158068") == ["0596158068", "9780596158064"]
        params = client.get.call_args[1]["params"]
        assert params["ai"] == "discovery"
        assert params["ip"] == "lib.example.org"

    def test_xisbn_failure_is_silent(self):
        client = MagicMock()
        client.get.side_effect = requests.ConnectionError("down")
        utils = WorldCatUtils(None, client)
        assert utils.get_xisbn("0596158068") == []

    def test_xisbn_unknown_isbn(self):
        client = MagicMock()
        client.get.return_value.text = '{"stat": "unknownId"}'
        assert WorldCatUtils(None, client).get_xisbn("123") == []
