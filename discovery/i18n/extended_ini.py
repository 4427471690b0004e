"""
Extended INI Translation Loader

Language files are simple ``key = "value"`` INI files. A file may name a
parent with ``@parent_ini = "other.ini"``; parent strings load first and the
child overrides them. Files found later in the path stack (local overrides)
override earlier ones, and keys missing from the requested locale are filled
from the fallback locales.
"""

import logging
import os
from typing import Dict, Iterable, List, Optional, Set, Union

logger = logging.getLogger(__name__)

PARENT_DIRECTIVE = "@parent_ini"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


class ExtendedIniReader:
    """Parses language INI files into plain dictionaries."""

    def parse_lines(self, lines: Iterable[str]) -> Dict[str, str]:
        data: Dict[str, str] = {}
        for line in lines:
            line = line.strip()
            if not line or line[0] in (";", "#", "["):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = _unquote(key)
            if key:
                data[key] = _unquote(value)
        return data

    def read_file(self, path: str) -> Dict[str, str]:
        with open(path, encoding="utf-8") as handle:
            return self.parse_lines(handle)


class ExtendedIni:
    """
    Translation loader over a stack of language directories.

    Args:
        path_stack (list): Directories searched in order; later ones override
        fallback_locales (str or list): Locale(s) used for missing strings
    """

    def __init__(
        self,
        path_stack: Optional[List[str]] = None,
        fallback_locales: Union[str, List[str], None] = None,
    ) -> None:
        self.path_stack = list(path_stack or [])
        if isinstance(fallback_locales, str):
            fallback_locales = [fallback_locales]
        self.fallback_locales = list(fallback_locales or [])
        self.reader = ExtendedIniReader()

    def load(self, locale: str, text_domain: str = "default") -> Dict[str, str]:
        messages = self._load_language(locale, text_domain)
        for fallback in self.fallback_locales:
            if fallback == locale:
                continue
            for key, value in self._load_language(fallback, text_domain).items():
                messages.setdefault(key, value)
        return messages

    def _filename(self, locale: str, text_domain: str) -> str:
        if text_domain == "default":
            return f"{locale}.ini"
        return os.path.join(text_domain, f"{locale}.ini")

    def _load_language(self, locale: str, text_domain: str) -> Dict[str, str]:
        filename = self._filename(locale, text_domain)
        messages: Dict[str, str] = {}
        found = False
        for directory in self.path_stack:
            path = os.path.join(directory, filename)
            if os.path.isfile(path):
                found = True
                messages.update(self._load_file(path, set()))
        if not found:
            logger.debug(f"No language file {filename} in {self.path_stack}")
        return messages

    def _load_file(self, path: str, seen: Set[str]) -> Dict[str, str]:
        real_path = os.path.realpath(path)
        if real_path in seen:
            logger.warning(f"Ignoring circular {PARENT_DIRECTIVE} reference to {path}")
            return {}
        seen.add(real_path)

        data = self.reader.read_file(path)
        parent = data.pop(PARENT_DIRECTIVE, None)
        if not parent:
            return data

        parent_path = os.path.join(os.path.dirname(path), parent)
        if not os.path.isfile(parent_path):
            logger.warning(f"Parent language file {parent_path} not found")
            return data
        merged = self._load_file(parent_path, seen)
        merged.update(data)
        return merged
