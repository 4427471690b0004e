"""
Unit tests for configuration classes

Tests the configuration system in discovery/config.py including:
- Environment-specific configs (Development, Production, Testing)
- Configuration selection and defaults
- Settings handed to the service registry
"""

import pytest
import os
from discovery.config import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)
from flask import Flask


class TestConfigClasses:
    """Test configuration classes"""

    def test_development_config_defaults(self):
        """Test development configuration defaults"""
        assert DevelopmentConfig.DEBUG is True
        assert DevelopmentConfig.TESTING is False
        assert DevelopmentConfig.APPLICATION_ENV == "development"

    def test_production_config_security(self):
        """Test production configuration security settings"""
        assert ProductionConfig.DEBUG is False
        assert ProductionConfig.APPLICATION_ENV == "production"
        assert 'X-Content-Type-Options' in ProductionConfig.SECURITY_HEADERS
        assert 'X-Frame-Options' in ProductionConfig.SECURITY_HEADERS

    def test_testing_config_isolation(self):
        """Test testing configuration uses its own cache directory"""
        assert TestingConfig.TESTING is True
        assert TestingConfig.APPLICATION_ENV == "testing"
        assert 'test_cache' in TestingConfig.CACHE_DIR

    def test_get_config_by_name(self):
        """Test getting configuration by name"""
        assert get_config('development') == DevelopmentConfig
        assert get_config('production') == ProductionConfig
        assert get_config('testing') == TestingConfig
        assert get_config('unknown') == DevelopmentConfig

    def test_config_environment_detection(self, monkeypatch):
        """Test configuration environment detection"""
        monkeypatch.delenv('FLASK_ENV', raising=False)
        assert get_config() == DevelopmentConfig

        monkeypatch.setenv('FLASK_ENV', 'production')
        assert get_config() == ProductionConfig


class TestSettings:
    """Test values exposed as app_settings"""

    def test_settings_keys(self):
        settings = Config.settings()
        assert set(settings) == {
            "APPLICATION_ENV",
            "CONFIG_DIR",
            "LANGUAGES_DIR",
            "LOCAL_OVERRIDE_DIR",
            "CACHE_DIR",
            "I18N_ENABLED",
        }

    def test_subclass_overrides_flow_into_settings(self, test_config):
        settings = test_config.settings()
        assert settings["CONFIG_DIR"] == test_config.CONFIG_DIR
        assert settings["APPLICATION_ENV"] == "testing"

    def test_init_app(self):
        app = Flask(__name__)
        TestingConfig.init_app(app)
        assert app.config["TESTING"] is True
        assert app.config["SECRET_KEY"]

    def test_production_security_headers(self, tmp_path):
        class _Production(ProductionConfig):
            CONFIG_DIR = str(tmp_path)
            CACHE_DIR = str(tmp_path / "cache")
            LOCAL_OVERRIDE_DIR = str(tmp_path / "local")

        from discovery import create_app

        client = create_app(_Production).test_client()
        response = client.get('/api/config')
        assert response.headers['X-Frame-Options'] == 'DENY'


class TestLogging:
    """Test centralized logging setup"""

    def test_setup_logging_creates_log_file(self, tmp_path):
        import logging
        from discovery.logging_config import setup_logging

        log_file = tmp_path / "logs" / "app.log"
        setup_logging("debug", str(log_file))

        assert log_file.exists()
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, tmp_path):
        import logging
        from discovery.logging_config import setup_logging

        setup_logging("chatty", str(tmp_path / "app.log"))
        assert logging.getLogger().level == logging.INFO
