"""
Translator Module

Message translation with pluggable loaders and an optional message cache.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..exceptions import BadMethodCallError
from ..services.service_registry import ServiceRegistry

logger = logging.getLogger(__name__)


class Translator:
    """Looks up translated strings, loading message tables on demand."""

    loader_name = "ExtendedIni"

    def __init__(self, locale: str = "en") -> None:
        self.locale = locale
        self._plugin_manager = ServiceRegistry()
        self._cache: Optional[Any] = None
        self._messages: Dict[Tuple[str, str], Dict[str, str]] = {}

    def get_plugin_manager(self) -> ServiceRegistry:
        """Registry of translation loaders, keyed by loader name."""
        return self._plugin_manager

    def set_cache(self, cache: Any) -> None:
        self._cache = cache

    def get_cache(self) -> Optional[Any]:
        return self._cache

    def set_locale(self, locale: str) -> None:
        self.locale = locale

    def translate(
        self, message: str, text_domain: str = "default", locale: Optional[str] = None
    ) -> str:
        """Translate ``message``; unknown keys come back unchanged."""
        messages = self._get_messages(text_domain, locale or self.locale)
        return messages.get(message, message)

    def _get_messages(self, text_domain: str, locale: str) -> Dict[str, str]:
        key = (text_domain, locale)
        if key in self._messages:
            return self._messages[key]

        cache_key = f"translator_messages.{text_domain}.{locale}"
        messages = self._cache.get_item(cache_key) if self._cache is not None else None
        if messages is None:
            messages = self._load_messages(text_domain, locale)
            if self._cache is not None:
                try:
                    self._cache.set_item(cache_key, messages)
                except OSError as e:
                    logger.warning(f"Could not cache messages for {locale}: {e}")

        self._messages[key] = messages
        return messages

    def _load_messages(self, text_domain: str, locale: str) -> Dict[str, str]:
        if not self._plugin_manager.has(self.loader_name):
            return {}
        loader = self._plugin_manager.get(self.loader_name)
        return loader.load(locale, text_domain)


class DisabledTranslator(Translator):
    """Translator used when translation is switched off; strings pass through."""

    def get_plugin_manager(self) -> ServiceRegistry:
        raise BadMethodCallError("Translation is disabled; no loader plugin manager")

    def translate(self, message, text_domain="default", locale=None) -> str:
        return message


class TranslatorFactory:
    """Builds the base translator from application settings."""

    def create_service(self, registry: ServiceRegistry) -> Translator:
        settings = registry.get("app_settings")
        config = registry.get("config_manager").get("config")
        locale = config.section("Site").get("language") or "en"
        if not settings.get("I18N_ENABLED", True):
            return DisabledTranslator(locale)
        return Translator(locale)
