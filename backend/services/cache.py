"""Simple in-memory TTL cache for upstream API responses. No Redis needed.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
a response may be fetched twice (once per worker). This is acceptable for this
project's scale — the cache still eliminates repeated calls within the
same worker. Operations never await, so a single event loop needs no lock.

Growth is unbounded: entries are only dropped on clear(), on a stale read, or
by purge_expired().
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300

# Returned by get() when the caller needs to tell a miss from a stored None.
MISSING = object()


def make_key(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """Fingerprint a request as ``<endpoint>_<params as canonical JSON>``.

    Parameter names are sorted so the same request always yields the same key,
    regardless of the order its parameters were built in.
    """
    canonical = json.dumps(dict(params or {}), sort_keys=True, separators=(",", ":"), default=str)
    return f"{endpoint}_{canonical}"


@dataclass(frozen=True)
class CacheEntry:
    payload: Any
    stored_at: float


class ResponseCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at < self.ttl_seconds

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._store.get(key)
        if entry is not None:
            if self._is_fresh(entry, self._clock()):
                logger.debug("Cache hit: %s", key)
                return entry.payload
            del self._store[key]
        logger.debug("Cache miss: %s", key)
        return default

    def put(self, key: str, payload: Any) -> None:
        self._store[key] = CacheEntry(payload=payload, stored_at=self._clock())

    def clear(self) -> int:
        """Drop every entry and return how many were removed."""
        removed = len(self._store)
        self._store.clear()
        logger.info("Cache cleared (%d items)", removed)
        return removed

    def purge_expired(self) -> int:
        """Physically remove stale entries. Does not change what get() returns."""
        now = self._clock()
        stale = [key for key, entry in self._store.items() if not self._is_fresh(entry, now)]
        for key in stale:
            del self._store[key]
        return len(stale)

    def size(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return self.size()
