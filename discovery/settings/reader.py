"""
Configuration Reader Module

Loads the discovery INI files (config.ini, facets.ini, ...) into read-only
nested sections. Factories only ever read these sections.
"""

import configparser
import logging
import os
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


def _strip_quotes(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


class ConfigSection(Mapping):
    """
    Read-only mapping over one configuration level.

    Nested levels are ConfigSection instances too. Looking up a missing
    section returns an empty section, so optional settings can be probed
    without guarding every level.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        converted = {}
        for key, value in (data or {}).items():
            if isinstance(value, Mapping) and not isinstance(value, ConfigSection):
                value = ConfigSection(value)
            converted[key] = value
        self._data = MappingProxyType(converted)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigSection({dict(self._data)!r})"

    def has_section(self, name: str) -> bool:
        return isinstance(self._data.get(name), ConfigSection)

    def section(self, name: str) -> "ConfigSection":
        value = self._data.get(name)
        return value if isinstance(value, ConfigSection) else ConfigSection()

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        value = self._data.get(key)
        if value in (None, ""):
            return default
        return int(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUE_VALUES

    def get_list(self, key: str, separator: str = ",") -> List[str]:
        value = self._data.get(key)
        if not value:
            return []
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return [item.strip() for item in str(value).split(separator) if item.strip()]

    def to_dict(self) -> Dict[str, Any]:
        return {
            key: value.to_dict() if isinstance(value, ConfigSection) else value
            for key, value in self._data.items()
        }


def read_ini_file(path: str) -> ConfigSection:
    """Parse an INI file into a ConfigSection keyed by section name."""
    parser = configparser.ConfigParser(interpolation=None, strict=False, delimiters=("=",))
    parser.optionxform = str  # keep key case
    with open(path, encoding="utf-8") as handle:
        parser.read_file(handle)

    data: Dict[str, Dict[str, str]] = {}
    for section_name in parser.sections():
        data[section_name] = {
            key: _strip_quotes(value) for key, value in parser.items(section_name)
        }
    return ConfigSection(data)


class ConfigManager:
    """
    Loads named configuration files on first request and caches them.

    ``get("config")`` reads ``config.ini`` from the local override directory
    if present there, otherwise from the base configuration directory. A
    missing file yields an empty section.
    """

    def __init__(self, config_dir: str, local_dir: Optional[str] = None) -> None:
        self.config_dir = config_dir
        self.local_dir = local_dir
        self._loaded: Dict[str, ConfigSection] = {}

    def _find_file(self, name: str) -> Optional[str]:
        filename = f"{name}.ini"
        candidates = []
        if self.local_dir:
            candidates.append(os.path.join(self.local_dir, "config", filename))
        candidates.append(os.path.join(self.config_dir, filename))
        for candidate in candidates:
            if os.path.isfile(candidate):
                return candidate
        return None

    def get(self, name: str) -> ConfigSection:
        if name not in self._loaded:
            path = self._find_file(name)
            if path is None:
                logger.debug(f"No configuration file found for '{name}'")
                self._loaded[name] = ConfigSection()
            else:
                logger.debug(f"Loading configuration '{name}' from {path}")
                self._loaded[name] = read_ini_file(path)
        return self._loaded[name]

    def set_config(self, name: str, section: Mapping[str, Any]) -> None:
        """Install an already-built configuration (tests, embedded setups)."""
        self._loaded[name] = (
            section if isinstance(section, ConfigSection) else ConfigSection(section)
        )
