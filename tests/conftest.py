import pytest
from discovery import create_app
from discovery.config import TestingConfig
from discovery.services.service_registry import ServiceRegistry
from discovery.services.wiring import register_services


@pytest.fixture
def test_config(tmp_path):
    """Testing configuration with every directory under tmp_path."""
    config_dir = tmp_path / "config"
    languages_dir = tmp_path / "languages"
    config_dir.mkdir()
    languages_dir.mkdir()

    class _Config(TestingConfig):
        CONFIG_DIR = str(config_dir)
        LANGUAGES_DIR = str(languages_dir)
        LOCAL_OVERRIDE_DIR = str(tmp_path / "local")
        CACHE_DIR = str(tmp_path / "cache")
        LOG_FILE = str(tmp_path / "test.log")

    return _Config


@pytest.fixture
def write_ini(test_config):
    """Write ``<name>.ini`` into the test configuration directory."""

    def _write(name, text, directory=None):
        path = (directory or test_config.CONFIG_DIR) + f"/{name}.ini"
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
        return path

    return _write


@pytest.fixture
def registry(test_config):
    """A fully wired registry without a Flask application."""
    registry = ServiceRegistry()
    register_services(registry, test_config.settings())
    return registry


@pytest.fixture
def set_config(registry):
    """Install the main configuration directly, as nested dicts."""

    def _set(data, name="config"):
        registry.get("config_manager").set_config(name, data)

    return _set


@pytest.fixture
def app(test_config):
    """Create application for testing."""
    return create_app(test_config)


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sample_records():
    """Records for the in-memory search backend."""
    return [
        {"id": "1", "title": "Python Programming", "author": "Smith, Jane", "format": "Book"},
        {"id": "2", "title": "Advanced Python", "author": "Doe, John", "format": "Book"},
        {"id": "3", "title": "Python Journal", "author": "Smith, Jane", "format": "Journal"},
        {"id": "4", "title": "Gardening Basics", "author": "Green, Al", "format": "Book"},
    ]
