"""
Core cache data structures.
"""
import time
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class CacheEntry:
    """
    A decoded response payload and the moment it was captured.

    Entries are immutable; a newer response replaces the entry wholesale.
    """
    data: Any
    fetched_at: float
    ttl_seconds: float
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    @property
    def age_seconds(self) -> float:
        """Seconds since data was fetched."""
        return self.clock() - self.fetched_at

    @property
    def is_fresh(self) -> bool:
        """Check if data is within its TTL."""
        return self.age_seconds < self.ttl_seconds
