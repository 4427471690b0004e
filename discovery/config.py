# config.py - Single source of truth for application-level configuration
import os
import secrets
from pathlib import Path
from dotenv import load_dotenv
from flask import Flask
from typing import Any, Dict, Optional

# Load environment variables from .env file
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: str = "true") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


class Config:
    """Base configuration class - all application settings are defined here.

    Discovery settings proper (proxy, search tabs, API keys, ...) live in the
    INI files under CONFIG_DIR and are read through the config manager.
    """

    # Server Configuration
    HOST = os.environ.get("HOST", "127.0.0.1")  # Default to localhost for security
    PORT = int(os.environ.get("PORT", 5000))
    # Generate a random secret key if not provided
    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)

    APPLICATION_ENV = "production"

    # Paths
    CONFIG_DIR = os.environ.get("DISCOVERY_CONFIG_DIR") or str(BASE_DIR / "config")
    LANGUAGES_DIR = os.environ.get("DISCOVERY_LANGUAGES_DIR") or str(
        BASE_DIR / "languages"
    )
    LOCAL_OVERRIDE_DIR = os.environ.get("DISCOVERY_LOCAL_DIR") or str(
        BASE_DIR / "local"
    )
    CACHE_DIR = os.environ.get("DISCOVERY_CACHE_DIR") or os.path.join(
        LOCAL_OVERRIDE_DIR, "cache"
    )

    # Internationalization
    I18N_ENABLED = _env_flag("DISCOVERY_I18N_ENABLED")

    # Logging Configuration
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE", "app.log")

    # Default values for subclasses
    DEBUG = False
    TESTING = False

    @classmethod
    def settings(cls) -> Dict[str, Any]:
        """Values exposed to the service registry as ``app_settings``"""
        return {
            "APPLICATION_ENV": cls.APPLICATION_ENV,
            "CONFIG_DIR": cls.CONFIG_DIR,
            "LANGUAGES_DIR": cls.LANGUAGES_DIR,
            "LOCAL_OVERRIDE_DIR": cls.LOCAL_OVERRIDE_DIR,
            "CACHE_DIR": cls.CACHE_DIR,
            "I18N_ENABLED": cls.I18N_ENABLED,
        }

    @classmethod
    def init_app(cls, app: Flask) -> None:
        """Initialize application with this config"""
        app.config.update(
            {
                "SECRET_KEY": cls.SECRET_KEY,
                "HOST": cls.HOST,
                "PORT": cls.PORT,
                "LOG_LEVEL": cls.LOG_LEVEL,
                "LOG_FILE": cls.LOG_FILE,
                "DEBUG": cls.DEBUG,
                "TESTING": cls.TESTING,
            }
        )
        app.config.update(cls.settings())

        # Call subclass-specific initialization
        cls._init_subclass_specific(app)  # type: ignore


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True
    TESTING = False
    APPLICATION_ENV = "development"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Development-specific initialization"""
        print("🔧 Development mode active")
        print(f"📁 Configuration directory: {cls.CONFIG_DIR}")
        print(f"🌐 Server will run on {cls.HOST}:{cls.PORT}")


class ProductionConfig(Config):
    """Production configuration"""

    DEBUG = False
    TESTING = False
    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

    # Production security headers
    SECURITY_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "1; mode=block",
    }

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Production-specific initialization"""

        # Add security headers middleware
        @app.after_request
        def set_security_headers(response: Any) -> Any:
            for header, value in cls.SECURITY_HEADERS.items():
                response.headers[header] = value
            return response


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DEBUG = True
    APPLICATION_ENV = "testing"
    CACHE_DIR = os.path.join(os.getcwd(), "test_cache")

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Testing-specific initialization"""
        pass


# Configuration registry
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(config_name: Optional[str] = None) -> type:
    """Get configuration class by name"""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    return config.get(config_name, config["default"])
