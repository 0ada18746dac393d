"""
Single-flight GETs: concurrent callers for one URL share one network call.

The first caller for a URL performs the request on the calling thread; callers
that arrive while it is outstanding block until it settles and receive the
same payload or the same exception. There is no cancellation, so a joined
caller waits for as long as the initiating request takes.
"""
import threading
import logging
from typing import Dict, Callable, Any, List
from dataclasses import dataclass, field

logger = logging.getLogger("cache.coalescer")


@dataclass
class PendingGet:
    """An outstanding request and, once settled, its outcome."""
    settled: threading.Event = field(default_factory=threading.Event)
    payload: Any = None
    error: Any = None
    waiters: int = 0


class RequestCoalescer:
    """
    Pending-request table keyed by URL.

    Usage:
        coalescer = RequestCoalescer()
        payload = coalescer.get_or_fetch(
            "/api/faq?activeOnly=true",
            lambda: client.fetch("/api/faq?activeOnly=true"),
        )
    """

    def __init__(self):
        self._pending: Dict[str, PendingGet] = {}
        self._lock = threading.Lock()

    def get_or_fetch(self, url: str, fetch_fn: Callable[[], Any]) -> Any:
        """
        Join the outstanding request for ``url`` or start one with ``fetch_fn``.

        Raises:
            Exception: Whatever fetch_fn raised, re-raised to every caller
        """
        with self._lock:
            pending = self._pending.get(url)
            if pending is None:
                pending = self._pending[url] = PendingGet()
                leader = True
            else:
                pending.waiters += 1
                leader = False

        if not leader:
            logger.debug(f"Joining in-flight GET {url} (waiters: {pending.waiters})")
            pending.settled.wait()
        else:
            try:
                pending.payload = fetch_fn()
            except Exception as e:
                pending.error = e
                logger.warning(f"GET {url} failed: {e}")
            finally:
                # Drop the entry before waking waiters so a retry starts fresh
                with self._lock:
                    self._pending.pop(url, None)
                pending.settled.set()

        if pending.error is not None:
            raise pending.error
        return pending.payload

    def waiter_count(self, url: str) -> int:
        """Callers currently joined to the request for ``url``."""
        with self._lock:
            pending = self._pending.get(url)
            return pending.waiters if pending else 0

    def is_pending(self, url: str) -> bool:
        with self._lock:
            return url in self._pending

    @property
    def active_requests(self) -> int:
        with self._lock:
            return len(self._pending)

    def pending_urls(self) -> List[str]:
        with self._lock:
            return list(self._pending)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "active_requests": self.active_requests,
            "active_keys": self.pending_urls(),
        }
