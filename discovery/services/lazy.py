"""
Lazy Loading Module

Value holders that stand in for a service and build it on first use. The
ILS authenticator is wired through one of these to break the cycle between
the authentication manager, the auth plugins and the catalog connection.
"""

import enum
import logging
import os
import threading
from typing import Any, Callable, Optional, Type

logger = logging.getLogger(__name__)


class ProxyState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"


class ProxyConfig:
    """
    Settings shared by lazy value holders.

    ``proxies_target_dir`` is the directory reserved for proxy artefacts
    under the cache directory. It is prepared by ``install()``, which the
    application calls once at startup.
    """

    def __init__(self, proxies_target_dir: Optional[str] = None) -> None:
        self.proxies_target_dir = proxies_target_dir
        self.installed = False

    def set_proxies_target_dir(self, directory: str) -> None:
        self.proxies_target_dir = directory

    def install(self) -> None:
        if self.installed:
            return
        if self.proxies_target_dir:
            os.makedirs(self.proxies_target_dir, exist_ok=True)
            logger.debug(f"Proxy target directory ready: {self.proxies_target_dir}")
        self.installed = True


class LazyLoadingValueHolder:
    """
    Transparent stand-in for an instance of ``target_class``.

    The initializer runs on the first attribute access that reaches the real
    object, under a lock, and at most once after it succeeds. A failed
    initialization puts the holder back in the uninitialized state so the
    next access tries again.
    """

    __slots__ = ("_target_class", "_initializer", "_wrapped", "_state", "_init_lock")

    def __init__(self, target_class: Type, initializer: Callable[[], Any]) -> None:
        object.__setattr__(self, "_target_class", target_class)
        object.__setattr__(self, "_initializer", initializer)
        object.__setattr__(self, "_wrapped", None)
        object.__setattr__(self, "_state", ProxyState.UNINITIALIZED)
        object.__setattr__(self, "_init_lock", threading.Lock())

    @property
    def __class__(self):  # type: ignore[override]
        return self._target_class

    def get_state(self) -> ProxyState:
        return self._state

    def is_proxy_initialized(self) -> bool:
        return self._state is ProxyState.INITIALIZED

    def initialize_proxy(self) -> bool:
        """Build the wrapped instance now; returns True once it exists."""
        self._get_wrapped()
        return True

    def get_wrapped_value_holder_value(self) -> Optional[Any]:
        """The wrapped instance, or None if it has not been built yet."""
        return self._wrapped

    def _get_wrapped(self) -> Any:
        if self._state is ProxyState.INITIALIZED:
            return self._wrapped

        with self._init_lock:
            # Another thread may have finished while we waited
            if self._state is ProxyState.INITIALIZED:
                return self._wrapped

            object.__setattr__(self, "_state", ProxyState.INITIALIZING)
            try:
                wrapped = self._initializer()
                if not isinstance(wrapped, self._target_class):
                    raise TypeError(
                        f"Lazy initializer returned {type(wrapped).__name__}, "
                        f"expected {self._target_class.__name__}"
                    )
            except BaseException:
                object.__setattr__(self, "_state", ProxyState.UNINITIALIZED)
                raise

            object.__setattr__(self, "_wrapped", wrapped)
            object.__setattr__(self, "_initializer", None)
            object.__setattr__(self, "_state", ProxyState.INITIALIZED)
            return wrapped

    def __getattr__(self, name: str) -> Any:
        return getattr(self._get_wrapped(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._get_wrapped(), name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._get_wrapped(), name)

    def __repr__(self) -> str:
        return (
            f"<LazyLoadingValueHolder for {self._target_class.__name__} "
            f"({self._state.value})>"
        )


class LazyLoadingValueHolderFactory:
    """Creates lazy value holders configured by a ``ProxyConfig``."""

    def __init__(self, config: Optional[ProxyConfig] = None) -> None:
        self.config = config or ProxyConfig()

    def create_proxy(
        self, target_class: Type, initializer: Callable[[], Any]
    ) -> LazyLoadingValueHolder:
        """
        Create a holder for ``target_class`` built by ``initializer``.

        Args:
            target_class (type): Class the holder impersonates
            initializer (callable): Zero-argument callable returning the real instance

        Returns:
            LazyLoadingValueHolder: Holder that has not called ``initializer`` yet
        """
        return LazyLoadingValueHolder(target_class, initializer)
