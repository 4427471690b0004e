"""
Service Registry Module

This module provides the registry that maps service identifiers to service
instances or to the factories that build them.
"""

import logging
import threading
from typing import Any, Callable, Dict, List

from ..exceptions import AppError, ResolutionError

logger = logging.getLogger(__name__)

Factory = Callable[["ServiceRegistry"], Any]


class ServiceRegistry:
    """
    A registry for managing application services with dependency injection support.

    Factories are called with the registry itself so they can resolve their
    own dependencies by name. Services are shared by default: the first
    resolution builds the instance and later resolutions return the same
    object.
    """

    def __init__(self) -> None:
        """Initialize an empty service registry."""
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Factory] = {}
        self._shared: Dict[str, bool] = {}
        self._aliases: Dict[str, str] = {}
        self._resolving: List[str] = []
        self._lock = threading.RLock()

    def _canonical_name(self, service_name: str) -> str:
        return service_name

    def _resolve_alias(self, service_name: str) -> str:
        name = self._canonical_name(service_name)
        seen = set()
        while name in self._aliases:
            if name in seen:
                raise ResolutionError(f"Alias loop detected for '{service_name}'")
            seen.add(name)
            name = self._aliases[name]
        return name

    def register(self, service_name: str, service_instance: Any) -> None:
        """
        Register a service instance with the registry.

        Args:
            service_name (str): Name to identify the service
            service_instance (object): The service instance to register
        """
        with self._lock:
            self._services[self._canonical_name(service_name)] = service_instance

    def register_factory(
        self, service_name: str, factory_func: Factory, shared: bool = True
    ) -> None:
        """
        Register a factory function for lazy service instantiation.

        Args:
            service_name (str): Name to identify the service
            factory_func (callable): Function taking the registry and returning the service
            shared (bool): Cache the built instance (True) or build one per request
        """
        name = self._canonical_name(service_name)
        with self._lock:
            self._factories[name] = factory_func
            self._shared[name] = shared
            self._services.pop(name, None)

    def register_alias(self, alias: str, service_name: str) -> None:
        """Make ``alias`` resolve to the same service as ``service_name``."""
        with self._lock:
            self._aliases[self._canonical_name(alias)] = self._canonical_name(
                service_name
            )

    def get(self, service_name: str) -> Any:
        """
        Get a service instance by name.

        If the service was registered as a shared factory, it will be
        instantiated on first access and cached for subsequent calls.

        Args:
            service_name (str): Name of the service to retrieve

        Returns:
            object: The requested service instance

        Raises:
            ResolutionError: If the service is not registered or cannot be built
        """
        with self._lock:
            name = self._resolve_alias(service_name)

            # Check if service is already instantiated
            if name in self._services:
                return self._services[name]

            if name not in self._factories:
                return self._get_unregistered(name)

            if name in self._resolving:
                chain = " -> ".join(self._resolving + [name])
                raise ResolutionError(f"Circular dependency detected: {chain}")

            self._resolving.append(name)
            try:
                service = self._create(name)
            finally:
                self._resolving.pop()

            if self._shared.get(name, True):
                self._services[name] = service
            return service

    def _factory_argument(self) -> "ServiceRegistry":
        return self

    def _get_unregistered(self, name: str) -> Any:
        raise ResolutionError(f"Service '{name}' not registered")

    def _create(self, name: str) -> Any:
        try:
            return self._factories[name](self._factory_argument())
        except AppError:
            raise
        except Exception as e:
            logger.error(f"Factory for service '{name}' failed: {e}")
            raise ResolutionError(
                f"Service '{name}' could not be created: {e}"
            ) from e

    def has(self, service_name: str) -> bool:
        """
        Check if a service is registered.

        Args:
            service_name (str): Name of the service to check

        Returns:
            bool: True if the service is registered, False otherwise
        """
        try:
            name = self._resolve_alias(service_name)
        except ResolutionError:
            return False
        return name in self._services or name in self._factories

    def is_instantiated(self, service_name: str) -> bool:
        """Check whether a shared service has already been built."""
        return self._resolve_alias(service_name) in self._services

    def get_registered_services(self) -> List[str]:
        """Names of all registered services and factories."""
        return sorted(set(self._services) | set(self._factories))

    def clear(self) -> None:
        """Clear all registered services, factories and aliases."""
        with self._lock:
            self._services.clear()
            self._factories.clear()
            self._shared.clear()
            self._aliases.clear()
