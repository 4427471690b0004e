"""
Database Adapter Module

Builds the SQLAlchemy engine used for user and tag storage.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from ..settings.reader import ConfigSection

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite://"


class AdapterFactory:
    """Creates database engines from the [Database] section of config.ini."""

    def __init__(self, config: ConfigSection) -> None:
        self.config = config

    def get_connection_string(self) -> str:
        return self.config.section("Database").get("database") or DEFAULT_DATABASE_URL

    def get_adapter(self) -> Engine:
        url = self.get_connection_string()
        options = {"future": True, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            options["pool_recycle"] = 3600
        logger.debug("Creating database engine")
        return create_engine(url, **options)
