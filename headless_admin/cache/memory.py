"""
In-memory response cache.

Keeps entries in a process-local dictionary with a per-entry TTL. Expired
entries are dropped lazily on lookup or via cleanup_expired().
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from headless_admin.cache.base import CacheBackend
from headless_admin.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CacheEntry:
    """
    A cached value.

    Attributes:
        value: The stored value
        ttl: Time-to-live in seconds, None for no expiry
        cached_at: Timestamp when the value was stored
    """
    value: Any
    ttl: Optional[int] = None
    cached_at: float = field(default_factory=time.time)

    @property
    def age_seconds(self) -> float:
        """Return how old this cache entry is in seconds."""
        return time.time() - self.cached_at

    def is_expired(self) -> bool:
        """Check if this cache entry has expired."""
        if self.ttl is None:
            return False
        return self.age_seconds >= self.ttl


@dataclass
class CacheStats:
    """
    Statistics about the memory cache.

    Attributes:
        hits: Number of cache hits
        misses: Number of cache misses
        evictions: Number of cache evictions
        total_entries: Current number of entries
    """
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    total_entries: int = 0

    @property
    def hit_rate(self) -> float:
        """Return the cache hit rate as a percentage."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return (self.hits / total) * 100.0


class MemoryCache(CacheBackend):
    """
    Process-local cache backend.

    When max_entries is reached the oldest entry is evicted to make room.
    """

    def __init__(self, max_entries: int = 10000, default_ttl: Optional[int] = None):
        self.max_entries = max_entries
        self.default_ttl = default_ttl
        self._cache: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._stats = CacheStats()
        logger.info(
            f"MemoryCache initialized: max_entries={max_entries}, "
            f"default_ttl={default_ttl}"
        )

    def _live_entry(self, key: str) -> Optional[CacheEntry]:
        # Caller holds the lock.
        entry = self._cache.get(key)
        if entry is None:
            return None
        if entry.is_expired():
            del self._cache[key]
            self._stats.evictions += 1
            return None
        return entry

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                self._stats.misses += 1
                return None
            self._stats.hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        entry = CacheEntry(
            value=value,
            ttl=ttl if ttl is not None else self.default_ttl,
            cached_at=time.time(),
        )
        with self._lock:
            if len(self._cache) >= self.max_entries and key not in self._cache:
                self._evict_oldest()
            self._cache[key] = entry
            self._stats.total_entries = len(self._cache)

    def delete(self, key: str) -> bool:
        with self._lock:
            removed = self._cache.pop(key, None) is not None
            self._stats.total_entries = len(self._cache)
            return removed

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self._cache.clear()
            self._stats.total_entries = 0

    def get_stats(self) -> CacheStats:
        """Return a snapshot of the current cache statistics."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                total_entries=len(self._cache),
            )

    def cleanup_expired(self) -> int:
        """
        Remove all expired entries from the cache.

        Returns:
            Number of entries removed
        """
        with self._lock:
            expired_keys = [k for k, v in self._cache.items() if v.is_expired()]
            for k in expired_keys:
                del self._cache[k]
            self._stats.evictions += len(expired_keys)
            self._stats.total_entries = len(self._cache)
        if expired_keys:
            logger.debug(f"Cache cleanup: removed {len(expired_keys)} expired entries")
        return len(expired_keys)

    def _evict_oldest(self) -> None:
        """Evict the oldest cache entry to make room."""
        if not self._cache:
            return
        oldest_key = min(self._cache, key=lambda k: self._cache[k].cached_at)
        del self._cache[oldest_key]
        self._stats.evictions += 1
