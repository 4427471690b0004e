"""
Unit tests for the plugin manager base class
"""

import pytest
from discovery.exceptions import ResolutionError
from discovery.services.plugin_manager import PluginManager
from discovery.services.service_registry import ServiceRegistry


class Widget:
    def __init__(self, name="widget"):
        self.name = name
        self.configured_with = None


class WidgetManager(PluginManager):
    instance_of = Widget


@pytest.fixture
def parent():
    registry = ServiceRegistry()
    registry.register("setting", "blue")
    return registry


@pytest.mark.unit
class TestPluginManager:
    """Test PluginManager behaviour"""

    def test_factories_receive_parent(self, parent):
        manager = WidgetManager(parent)
        manager.register_factory("Colored", lambda p: Widget(p.get("setting")))
        assert manager.get("Colored").name == "blue"

    def test_names_are_case_insensitive(self, parent):
        manager = WidgetManager(parent)
        manager.register_factory("KeepAlive", lambda p: Widget())
        assert manager.has("keepalive")
        assert manager.get("KEEPALIVE") is manager.get("keepAlive")

    def test_wrong_type_is_rejected(self, parent):
        manager = WidgetManager(parent)
        manager.register_factory("Bad", lambda p: "not a widget")
        with pytest.raises(ResolutionError, match="does not implement Widget"):
            manager.get("Bad")

    def test_initializers_run_on_new_plugins(self, parent):
        manager = WidgetManager(parent)
        manager.register_factory("Plain", lambda p: Widget())

        def configure(plugin, registry):
            plugin.configured_with = registry.get("setting")

        manager.add_initializer(configure)
        assert manager.get("Plain").configured_with == "blue"

    def test_non_shared_by_default_in_subclass(self, parent):
        class FreshManager(WidgetManager):
            shared_by_default = False

        manager = FreshManager(parent)
        manager.register_factory("Plain", lambda p: Widget())
        assert manager.get("Plain") is not manager.get("Plain")

    def test_fallback_factory(self, parent):
        manager = WidgetManager(parent)
        manager.set_fallback_factory(
            lambda p, name: Widget(name) if name.startswith("auto") else None
        )
        assert manager.get("AutoOne").name == "autoone"
        with pytest.raises(ResolutionError, match="not registered"):
            manager.get("other")

    def test_shares_parent_lock(self, parent):
        manager = WidgetManager(parent)
        assert manager._lock is parent._lock
