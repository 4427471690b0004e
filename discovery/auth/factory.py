"""
Factory for authentication services.

Each function takes the service registry and returns a fully wired
authentication strategy.
"""

from ..services.lazy import LazyLoadingValueHolderFactory
from ..services.service_registry import ServiceRegistry
from ..services.session import SessionContainer
from .choice_auth import ChoiceAuth
from .facebook import Facebook
from .ils import ILS, MultiILS
from .ils_authenticator import ILSAuthenticator
from .multi_auth import MultiAuth
from .shibboleth import Shibboleth


def get_choice_auth(registry: ServiceRegistry) -> ChoiceAuth:
    """Construct the ChoiceAuth plugin."""
    container = SessionContainer("ChoiceAuth", registry.get("session_manager"))
    auth = ChoiceAuth(container)
    auth.set_plugin_manager(registry.get("auth.plugin_manager"))
    return auth


def get_facebook(registry: ServiceRegistry) -> Facebook:
    """Construct the Facebook plugin."""
    container = SessionContainer("Facebook", registry.get("session_manager"))
    return Facebook(container)


def get_ils(registry: ServiceRegistry) -> ILS:
    """Construct the ILS plugin."""
    return ILS(registry.get("ils.connection"), registry.get("auth.ils_authenticator"))


def get_ils_authenticator(registry: ServiceRegistry):
    """
    Construct the ILS authenticator.

    The authenticator is wrapped in a lazy value holder so it is not built
    until first used. This breaks the cycle between the auth manager, the
    ILS auth plugins and the catalog connection, and skips the setup cost
    when no catalog login happens.
    """

    def initializer() -> ILSAuthenticator:
        auth = registry.get("auth.manager")
        catalog = registry.get("ils.connection")
        key = (
            registry.get("config_manager")
            .get("config")
            .section("Authentication")
            .get("ils_encryption_key")
        )
        return ILSAuthenticator(auth, catalog, key)

    factory = LazyLoadingValueHolderFactory(registry.get("proxy_config"))
    return factory.create_proxy(ILSAuthenticator, initializer)


def get_multi_auth(registry: ServiceRegistry) -> MultiAuth:
    """Construct the MultiAuth plugin."""
    auth = MultiAuth()
    auth.set_plugin_manager(registry.get("auth.plugin_manager"))
    return auth


def get_multi_ils(registry: ServiceRegistry) -> MultiILS:
    """Construct the MultiILS plugin."""
    return MultiILS(registry.get("ils.connection"), registry.get("auth.ils_authenticator"))


def get_shibboleth(registry: ServiceRegistry) -> Shibboleth:
    """Construct the Shibboleth plugin."""
    return Shibboleth(registry.get("session_manager"))
