"""Application Factory Module

This module contains the application factory function for creating Flask app instances.
"""

from flask import Flask
from .config import get_config
from .services.service_registry import ServiceRegistry
from .services.wiring import initialize_services, register_services
from typing import Optional, Union


def create_app(config_name: Optional[Union[str, type]] = None) -> Flask:
    """Create and configure a Flask application instance.

    Every application gets its own service registry; no registry is shared
    between applications.

    Args:
        config_name: Configuration name, or a configuration class

    Returns:
        Flask: Configured Flask application
    """
    app = Flask(__name__)

    # Get configuration class and initialize
    if isinstance(config_name, type):
        config_class = config_name
    else:
        config_class = get_config(config_name or "development")
    config_class.init_app(app)  # type: ignore

    # Wire services and run startup steps
    registry = ServiceRegistry()
    register_services(registry, config_class.settings())  # type: ignore
    initialize_services(registry)

    # Make services available through the app context
    app.service_registry = registry  # type: ignore

    # Register blueprints
    from .routes import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
