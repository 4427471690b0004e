"""AJAX handlers served by the /api/ajax endpoint."""

from .base import AbstractBase
from .keep_alive import KeepAlive, KeepAliveFactory
from .plugin_manager import AjaxHandlerPluginManager

__all__ = ["AbstractBase", "AjaxHandlerPluginManager", "KeepAlive", "KeepAliveFactory"]
