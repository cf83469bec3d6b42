"""
Caching adapter implementations for findallimports.

The engine validates (and therefore parses) a file every time a reference
reaches it, even when the file is already in the visited ledger. Wrapping
an adapter in a caching layer makes every later arrival a cache hit.
"""

import logging
import os
from typing import Any, Optional, Tuple

from cachetools import TTLCache

from .base import ParsedModule, SourceAdapter


logger = logging.getLogger(__name__)


class CachingSourceAdapter(SourceAdapter):
    """
    Optional caching layer for any source adapter.

    Parsed modules are cached by path. Failed parses are not cached, so a
    file fixed between two traversals is parsed again.

    Example:
        adapter = CachingSourceAdapter(JavaScriptSourceAdapter(), max_size=50000)
        for entry in entries:
            find_all_imports(entry, adapter=adapter)
    """

    def __init__(
        self,
        base_adapter: SourceAdapter,
        max_size: int = 10000,
        ttl: float = 300.0  # 5 minutes
    ):
        """
        Initialize caching adapter.

        Args:
            base_adapter: The underlying source adapter to wrap
            max_size: Maximum number of entries in cache
            ttl: Time-to-live for cache entries in seconds
        """
        self._adapter = base_adapter
        self._cache = TTLCache(maxsize=max_size, ttl=ttl)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    def exists(self, file_path: str) -> bool:
        return self._adapter.exists(file_path)

    def parse(self, file_path: str) -> Optional[ParsedModule]:
        cache_key = self._get_cache_key(file_path)
        cached = self._check_cache(file_path, cache_key)
        if cached is not None:
            self.cache_hits += 1
            return cached

        self.cache_misses += 1
        module = self._adapter.parse(file_path)
        if module is not None:
            self._cache[file_path] = (cache_key, module)
        return module

    def resolve(
        self,
        current_dir: str,
        specifier: str,
        working_directory: str,
    ) -> Optional[str]:
        return self._adapter.resolve(current_dir, specifier, working_directory)

    def _get_cache_key(self, file_path: str) -> Any:
        """
        Generate the validity key stored next to a cached module.

        A cached entry is only used while the key is unchanged.
        """
        return None

    def _check_cache(self, file_path: str, cache_key: Any) -> Optional[ParsedModule]:
        entry: Optional[Tuple[Any, ParsedModule]] = self._cache.get(file_path)
        if entry is None:
            return None
        stored_key, module = entry
        if stored_key != cache_key:
            logger.debug("Stale cache entry for %s", file_path)
            del self._cache[file_path]
            return None
        return module

    def get_cache_stats(self) -> dict:
        """
        Get cache statistics for monitoring and debugging.
        """
        total_requests = self.cache_hits + self.cache_misses
        hit_rate = self.cache_hits / total_requests if total_requests > 0 else 0

        return {
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'hit_rate': hit_rate,
            'cache_size': len(self._cache),
            'max_size': self._cache.maxsize,
            'ttl': self._cache.ttl
        }

    def clear_cache(self) -> None:
        """
        Clear all cached entries.
        """
        self._cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._adapter!r})"


class FilesystemCachingAdapter(CachingSourceAdapter):
    """
    Filesystem-specific caching adapter with mtime-based invalidation.

    A cached module is dropped as soon as its file's modification time or
    size changes, so long-running tools (watchers, language servers) can
    keep one adapter across traversals.
    """

    def _get_cache_key(self, file_path: str) -> Any:
        try:
            stat = os.stat(file_path)
        except OSError:
            return None
        return (stat.st_mtime_ns, stat.st_size)
