"""
Cache Manager Module

Named file caches under the application cache directory. The translator
keeps its message tables in the ``language`` cache.
"""

import hashlib
import json
import logging
import os
from typing import Any, Dict, Optional

from ..exceptions import CacheError
from ..settings.reader import ConfigSection

logger = logging.getLogger(__name__)

KNOWN_CACHES = ("config", "language", "object", "searchspecs")


class FileCache:
    """JSON-file cache stored in a single directory."""

    def __init__(self, directory: str) -> None:
        self.directory = directory

    def _path(self, key: str) -> str:
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
        return os.path.join(self.directory, f"{digest}.json")

    def has_item(self, key: str) -> bool:
        return os.path.exists(self._path(key))

    def get_item(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if not os.path.exists(path):
            return default
        try:
            with open(path, encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, ValueError) as e:
            logger.warning(f"Discarding unreadable cache entry {path}: {e}")
            return default

    def set_item(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as handle:
            json.dump(value, handle)
        os.replace(tmp_path, path)

    def remove_item(self, key: str) -> None:
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            pass


class CacheManager:
    """
    Hands out named caches.

    Args:
        config (ConfigSection): Main configuration; ``[Cache] disabled`` turns caching off
        cache_dir (str): Base directory for all caches
    """

    def __init__(self, config: ConfigSection, cache_dir: str) -> None:
        self.config = config
        self.cache_dir = cache_dir
        self._caches: Dict[str, FileCache] = {}

    def get_cache_dir(self) -> str:
        return self.cache_dir

    def is_disabled(self) -> bool:
        return self.config.section("Cache").get_bool("disabled")

    def get_cache(self, name: str) -> FileCache:
        """
        Get the cache called ``name``.

        Raises:
            CacheError: Unknown name, caching disabled, or unusable directory
        """
        if name not in KNOWN_CACHES:
            raise CacheError(f"Requested unknown cache: {name}")
        if self.is_disabled():
            raise CacheError("Caching is disabled in configuration")

        cache: Optional[FileCache] = self._caches.get(name)
        if cache is None:
            directory = os.path.join(self.cache_dir, name)
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise CacheError(f"Cannot create cache directory {directory}: {e}") from e
            if not os.access(directory, os.W_OK):
                raise CacheError(f"Cache directory {directory} is not writable")
            cache = self._caches[name] = FileCache(directory)
        return cache
