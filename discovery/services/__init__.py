"""
Services Package

Service registry, plugin managers, lazy value holders and the
infrastructure services they hand out.
"""

from .lazy import LazyLoadingValueHolder, LazyLoadingValueHolderFactory, ProxyConfig, ProxyState
from .plugin_manager import PluginManager
from .service_registry import ServiceRegistry

__all__ = [
    "LazyLoadingValueHolder",
    "LazyLoadingValueHolderFactory",
    "PluginManager",
    "ProxyConfig",
    "ProxyState",
    "ServiceRegistry",
]
