"""
Response caching with a fixed TTL and request coalescing.
"""
from .core import CacheEntry
from .coalescer import RequestCoalescer
from .store import ResponseCache

__all__ = [
    "CacheEntry",
    "RequestCoalescer",
    "ResponseCache",
]
