"""
Unit tests for the cache manager and session storage
"""

import os

import pytest
from discovery.exceptions import CacheError
from discovery.services.cache import CacheManager, FileCache
from discovery.services.session import SessionContainer, SessionManager
from discovery.settings.reader import ConfigSection


@pytest.mark.unit
class TestCacheManager:
    """Test named file caches"""

    def test_cache_round_trip(self, tmp_path):
        manager = CacheManager(ConfigSection(), str(tmp_path))
        cache = manager.get_cache("language")
        assert isinstance(cache, FileCache)
        assert cache.get_item("missing") is None
        cache.set_item("messages", {"Search": "Suche"})
        assert cache.has_item("messages")
        assert cache.get_item("messages") == {"Search": "Suche"}
        cache.remove_item("messages")
        assert cache.has_item("messages") is False

    def test_same_cache_object_per_name(self, tmp_path):
        manager = CacheManager(ConfigSection(), str(tmp_path))
        assert manager.get_cache("object") is manager.get_cache("object")
        assert os.path.isdir(tmp_path / "object")

    def test_unknown_cache_name(self, tmp_path):
        manager = CacheManager(ConfigSection(), str(tmp_path))
        with pytest.raises(CacheError, match="unknown cache"):
            manager.get_cache("nonsense")

    def test_disabled_cache(self, tmp_path):
        config = ConfigSection({"Cache": {"disabled": "true"}})
        manager = CacheManager(config, str(tmp_path))
        with pytest.raises(CacheError):
            manager.get_cache("language")

    def test_uncreatable_directory(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        manager = CacheManager(ConfigSection(), str(blocker))
        with pytest.raises(CacheError):
            manager.get_cache("language")

    def test_get_cache_dir(self, tmp_path):
        assert CacheManager(ConfigSection(), str(tmp_path)).get_cache_dir() == str(tmp_path)


@pytest.mark.unit
class TestSession:
    """Test session storage outside a request"""

    def test_session_id_is_stable(self):
        manager = SessionManager()
        session_id = manager.get_id()
        assert session_id
        assert manager.get_id() == session_id

    def test_containers_are_namespaced(self):
        manager = SessionManager()
        first = SessionContainer("First", manager)
        second = SessionContainer("Second", manager)
        first["key"] = "value"
        assert first["key"] == "value"
        assert "key" not in second
        assert manager.get_storage()["First"] == {"key": "value"}

    def test_container_clear_and_delete(self):
        container = SessionContainer("Account", SessionManager())
        container["a"] = 1
        container["b"] = 2
        del container["a"]
        assert dict(container) == {"b": 2}
        container.clear()
        assert len(container) == 0

    def test_destroy(self):
        manager = SessionManager()
        manager.get_id()
        manager.destroy()
        assert manager.get_storage() == {}

    def test_custom_storage_factory(self):
        storage = {}
        manager = SessionManager(lambda: storage)
        manager.get_id()
        assert "session_id" in storage
