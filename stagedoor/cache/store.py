"""
Time-boxed store for decoded GET payloads, keyed by request URL.
"""
import threading
import logging
import time
from typing import Dict, Optional, Callable, Any

from .core import CacheEntry

logger = logging.getLogger("cache.store")


class ResponseCache:
    """
    Fixed-TTL response cache.

    - One entry per URL, replaced wholesale on every store
    - An entry is served only while now - fetched_at < ttl
    - Expired entries are dropped lazily on lookup
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            ttl_seconds: How long a stored payload stays fresh
            clock: Monotonic time source, in seconds
        """
        self._cache: Dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._ttl_seconds = ttl_seconds
        self._clock = clock

        self._stats = {
            "hits": 0,
            "misses": 0,
        }

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get_fresh(self, cache_key: str, record: bool = True) -> Optional[CacheEntry]:
        """
        Return the entry for a key if it is still fresh.

        Args:
            cache_key: Request URL
            record: Count this lookup in the hit/miss stats

        Returns:
            The fresh CacheEntry, or None on a miss or an expired entry
        """
        with self._lock:
            entry = self._cache.get(cache_key)

            if entry is not None and entry.is_fresh:
                logger.debug(f"CACHE HIT: {cache_key} [age={entry.age_seconds:.1f}s]")
                if record:
                    self._stats["hits"] += 1
                return entry

            if entry is not None:
                logger.debug(f"CACHE EXPIRED: {cache_key} [age={entry.age_seconds:.1f}s]")
                del self._cache[cache_key]
            if record:
                self._stats["misses"] += 1
            return None

    def store(self, cache_key: str, data: Any) -> CacheEntry:
        """Store data in cache, stamped with the current time."""
        entry = CacheEntry(
            data=data,
            fetched_at=self._clock(),
            ttl_seconds=self._ttl_seconds,
            clock=self._clock,
        )
        with self._lock:
            self._cache[cache_key] = entry
        return entry

    def invalidate(self, cache_key: str) -> bool:
        """
        Invalidate a specific cache entry.

        Returns:
            True if entry was found and removed
        """
        with self._lock:
            if cache_key in self._cache:
                del self._cache[cache_key]
                logger.info(f"Invalidated cache: {cache_key}")
                return True
            return False

    def clear(self) -> int:
        """
        Clear all cache entries.

        Returns:
            Number of entries cleared
        """
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            logger.info(f"Cleared {count} cache entries")
            return count

    def __contains__(self, cache_key: str) -> bool:
        with self._lock:
            return cache_key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total * 100) if total > 0 else 0

            return {
                "entries": len(self._cache),
                "hits": self._stats["hits"],
                "misses": self._stats["misses"],
                "hit_rate_percent": round(hit_rate, 1),
            }
