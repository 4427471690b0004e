"""
Settings Package

Readers for the discovery INI configuration files.
"""

from .reader import ConfigManager, ConfigSection, read_ini_file
from .account_capabilities import AccountCapabilities

__all__ = ["ConfigManager", "ConfigSection", "read_ini_file", "AccountCapabilities"]
