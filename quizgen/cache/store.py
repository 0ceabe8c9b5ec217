"""In-memory TTL store with separate success/failure windows.

Used at three tiers: raw document content, derived context and final quiz
output. Each tier gets its own instance with its own TTLs and size bound.

  - positive entries live for ``positive_ttl`` seconds
  - negative entries ("tried and failed") live for ``negative_ttl`` seconds
  - when full, the oldest inserted entry is evicted (FIFO, not LRU)

Expiry is logical: an expired entry reads as absent and is dropped when seen.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from cachetools import FIFOCache

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """A stored value, or a negative marker when ``negative`` is set."""
    value: V | None
    inserted_at: float
    negative: bool = False


class TTLStore(Generic[V]):
    """Bounded key/value store with per-class TTLs. Safe to share across tasks and threads."""

    def __init__(
        self,
        name: str,
        positive_ttl: float,
        negative_ttl: float,
        max_entries: int,
        timer: Callable[[], float] = time.monotonic,
    ):
        if negative_ttl >= positive_ttl:
            raise ValueError(
                f"{name}: negative_ttl ({negative_ttl}) must be shorter than positive_ttl ({positive_ttl})"
            )
        if max_entries < 1:
            raise ValueError(f"{name}: max_entries must be at least 1")
        self.name = name
        self.positive_ttl = positive_ttl
        self.negative_ttl = negative_ttl
        self.max_entries = max_entries
        self._timer = timer
        self._entries: FIFOCache = FIFOCache(maxsize=max_entries)
        self._lock = threading.Lock()

    def get(self, key: str) -> CacheEntry[V] | None:
        """Return the live entry for ``key``, or None on miss/expiry."""
        now = self._timer()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            ttl = self.negative_ttl if entry.negative else self.positive_ttl
            if now - entry.inserted_at > ttl:
                del self._entries[key]
                logger.debug("Cache EXPIRED | tier=%s | key=%s", self.name, key[:20])
                return None
            return entry

    def set(self, key: str, value: V):
        """Store a successful result."""
        self._put(key, CacheEntry(value=value, inserted_at=self._timer()))

    def set_negative(self, key: str):
        """Remember a failure for the shorter negative window."""
        self._put(key, CacheEntry(value=None, inserted_at=self._timer(), negative=True))

    def _put(self, key: str, entry: CacheEntry):
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_entries:
                evicted, _ = self._entries.popitem()
                logger.debug("Cache EVICT | tier=%s | key=%s", self.name, evicted[:20])
            self._entries[key] = entry
        logger.debug(
            "Cache SET | tier=%s | key=%s | negative=%s",
            self.name, key[:20], entry.negative,
        )

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def clear(self):
        with self._lock:
            self._entries.clear()
