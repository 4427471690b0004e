#!/usr/bin/env python3
"""
Discovery App Runner

This file handles starting the Flask application with proper configuration
for both development and production environments.
"""

import os
import sys
from discovery import create_app
from discovery.config import get_config
from discovery.logging_config import setup_logging


def main():
    """Main function to run the application"""
    print("📚 Starting Discovery service...")

    # Always default to development locally unless FLASK_ENV is explicitly set
    config_name = os.environ.get('FLASK_ENV') or 'development'
    # Keep FLASK_ENV in sync so logging_config can determine environment-specific logger levels
    os.environ['FLASK_ENV'] = config_name
    config_class = get_config(config_name)

    # Setup logging using centralized configuration
    setup_logging(config_class.LOG_LEVEL, config_class.LOG_FILE)

    app = create_app(config_name)

    # Prefer environment PORT when available (managed platforms)
    port = int(os.environ.get('PORT', config_class.PORT))

    print(f"🔧 Environment: {config_name}")
    print(f"🔧 Debug mode: {'ON' if config_class.DEBUG else 'OFF'}")
    print(f"📁 Configuration directory: {config_class.CONFIG_DIR}")
    print(f"🌐 Server will listen on {config_class.HOST}:{port}")
    print("-" * 50)

    if config_name == "production":
        print("❌ Refusing to start Flask dev server in production.")
        print("   Use a WSGI server (gunicorn) instead.")
        sys.exit(2)

    try:
        app.run(
            host=config_class.HOST,
            port=port,
            debug=config_class.DEBUG,
            threaded=True
        )
    except KeyboardInterrupt:
        print("\n👋 Shutting down gracefully...")


# Create the app instance for WSGI servers (Gunicorn)
app = None

if __name__ == '__main__':
    main()
else:
    # When imported by WSGI server, create app without running server
    config_name = os.environ.get('FLASK_ENV', 'production')
    config_class = get_config(config_name)
    setup_logging(config_class.LOG_LEVEL, config_class.LOG_FILE)
    app = create_app(config_name)
