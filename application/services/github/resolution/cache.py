"""
In-memory caches for commit resolution.

``fresh`` holds resolved commit shas for a few seconds so bursts of requests
for the same branch/path do not each hit GitHub. ``validator`` remembers the
last ETag per key so a later request can be revalidated with
``If-None-Match``; GitHub does not count 304 replies against the rate limit.
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, Tuple, TypeVar

from application.services.github.models.types import ResolutionKey, ValidatorEntry

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Clock = Callable[[], float]


class LRUCache(Generic[K, V]):
    """Capacity-bounded LRU map with an optional per-entry TTL.

    Expired entries are dropped lazily, when they are read.
    """

    def __init__(
        self,
        max_size: int,
        ttl: Optional[float] = None,
        clock: Clock = time.monotonic,
    ):
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[K, Tuple[V, Optional[float]]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            item = self._entries.get(key)
            if item is None:
                return None
            value, expires_at = item
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return value

    def set(self, key: K, value: V) -> None:
        with self._lock:
            expires_at = self._clock() + self.ttl if self.ttl is not None else None
            self._entries[key] = (value, expires_at)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def delete(self, key: K) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheStore:
    """The two independent caches used by commit resolution."""

    def __init__(
        self,
        fresh_max_size: int = 500,
        fresh_ttl: float = 5.0,
        validator_max_size: int = 50000,
        clock: Clock = time.monotonic,
    ):
        self.fresh: LRUCache[ResolutionKey, str] = LRUCache(
            fresh_max_size, ttl=fresh_ttl, clock=clock
        )
        self.validator: LRUCache[ResolutionKey, ValidatorEntry] = LRUCache(
            validator_max_size
        )

    def get_fresh(self, key: ResolutionKey) -> Optional[str]:
        return self.fresh.get(key)

    def set_fresh(self, key: ResolutionKey, sha: str) -> None:
        self.fresh.set(key, sha)

    def invalidate_fresh(self, key: ResolutionKey) -> bool:
        """Drop a resolved sha, e.g. right after pushing a commit to the branch."""
        removed = self.fresh.delete(key)
        if removed:
            logger.debug(f"Invalidated cached resolution for {key}")
        return removed

    def get_validator(self, key: ResolutionKey) -> Optional[ValidatorEntry]:
        return self.validator.get(key)

    def set_validator(self, key: ResolutionKey, entry: ValidatorEntry) -> None:
        self.validator.set(key, entry)
