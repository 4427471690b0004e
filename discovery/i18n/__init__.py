"""
Internationalization Package

Translator and translation loaders.
"""

from .translator import Translator, DisabledTranslator, TranslatorFactory
from .extended_ini import ExtendedIni, ExtendedIniReader

__all__ = [
    "Translator",
    "DisabledTranslator",
    "TranslatorFactory",
    "ExtendedIni",
    "ExtendedIniReader",
]
