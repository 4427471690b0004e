"""
Unit tests for the service registry

Covers registration, shared and non-shared factories, aliases, error
wrapping, cycle detection and concurrent first resolution.
"""

import threading
import time

import pytest
from discovery.exceptions import ConfigurationError, ResolutionError
from discovery.services.service_registry import ServiceRegistry


@pytest.mark.unit
class TestServiceRegistry:
    """Test ServiceRegistry behaviour"""

    def test_register_instance(self):
        registry = ServiceRegistry()
        service = object()
        registry.register("thing", service)
        assert registry.get("thing") is service
        assert registry.has("thing")

    def test_shared_factory_returns_same_instance(self):
        """Two resolutions of a shared identifier return the identical object"""
        registry = ServiceRegistry()
        registry.register_factory("thing", lambda r: object())
        assert registry.is_instantiated("thing") is False
        first = registry.get("thing")
        assert registry.get("thing") is first
        assert registry.is_instantiated("thing") is True

    def test_non_shared_factory_builds_each_time(self):
        registry = ServiceRegistry()
        registry.register_factory("thing", lambda r: object(), shared=False)
        assert registry.get("thing") is not registry.get("thing")

    def test_factory_receives_registry(self):
        registry = ServiceRegistry()
        registry.register("name", "world")
        registry.register_factory("greeting", lambda r: f"hello {r.get('name')}")
        assert registry.get("greeting") == "hello world"

    def test_alias_resolves_to_target(self):
        registry = ServiceRegistry()
        registry.register_factory("thing", lambda r: object())
        registry.register_alias("other", "thing")
        assert registry.get("other") is registry.get("thing")
        assert registry.has("other")

    def test_alias_loop_is_rejected(self):
        registry = ServiceRegistry()
        registry.register_alias("a", "b")
        registry.register_alias("b", "a")
        with pytest.raises(ResolutionError):
            registry.get("a")
        assert registry.has("a") is False

    def test_unknown_service_raises(self):
        registry = ServiceRegistry()
        with pytest.raises(ResolutionError) as exc_info:
            registry.get("missing")
        assert "missing" in exc_info.value.message
        assert registry.has("missing") is False

    def test_factory_failure_is_wrapped(self):
        registry = ServiceRegistry()

        def broken(r):
            raise KeyError("boom")

        registry.register_factory("broken", broken)
        with pytest.raises(ResolutionError) as exc_info:
            registry.get("broken")
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_application_errors_propagate_unchanged(self):
        registry = ServiceRegistry()

        def needs_config(r):
            raise ConfigurationError("key missing")

        registry.register_factory("needs_config", needs_config)
        with pytest.raises(ConfigurationError, match="key missing"):
            registry.get("needs_config")
        assert registry.is_instantiated("needs_config") is False

    def test_cycle_is_detected(self):
        registry = ServiceRegistry()
        registry.register_factory("a", lambda r: r.get("b"))
        registry.register_factory("b", lambda r: r.get("a"))
        with pytest.raises(ResolutionError, match="Circular dependency"):
            registry.get("a")

    def test_reregistering_factory_drops_cached_instance(self):
        registry = ServiceRegistry()
        registry.register_factory("thing", lambda r: "old")
        assert registry.get("thing") == "old"
        registry.register_factory("thing", lambda r: "new")
        assert registry.get("thing") == "new"

    def test_get_registered_services(self):
        registry = ServiceRegistry()
        registry.register("b", 1)
        registry.register_factory("a", lambda r: 2)
        assert registry.get_registered_services() == ["a", "b"]

    def test_clear(self):
        registry = ServiceRegistry()
        registry.register("thing", 1)
        registry.register_alias("alias", "thing")
        registry.clear()
        assert registry.has("thing") is False
        assert registry.has("alias") is False

    def test_concurrent_first_resolution_builds_once(self):
        registry = ServiceRegistry()
        calls = []

        def slow_factory(r):
            calls.append(1)
            time.sleep(0.01)
            return object()

        registry.register_factory("slow", slow_factory)
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(registry.get("slow")))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is results[0] for result in results)
