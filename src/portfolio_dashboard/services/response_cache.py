"""In-process TTL cache for backend read responses."""

import copy
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

# Cache keys are namespaced by endpoint so one prefix can invalidate a family.
PORTFOLIO_SUMMARY_KEY = "portfolio:summary"
API_STATUS_KEY = "api:status"
PORTFOLIO_PREFIX = "portfolio"


def monotonic_ms() -> float:
    """Return a monotonic clock reading in milliseconds."""
    return time.monotonic() * 1000.0


class _Miss:
    """Sentinel type for a cache miss."""

    _instance: Optional["_Miss"] = None

    def __new__(cls) -> "_Miss":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"


MISS = _Miss()


@dataclass
class CacheEntry:
    """A stored response body and the time it was stored."""

    key: str
    payload: Any
    stored_at: float


class ResponseCache:
    """
    Key/value cache for JSON response bodies with lazy TTL expiry.

    The TTL is chosen by each caller on read, not stored in the entry. Expired
    entries are dropped on the next read for that key; there is no background
    sweep. Payloads are copied on the way in and out so callers never share
    the stored object.

    The cache never raises.
    """

    def __init__(self, clock: Callable[[], float] = monotonic_ms):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str, ttl_ms: float) -> Any:
        """
        Return the payload stored under key, or MISS.

        An entry older than ttl_ms is deleted and reported as MISS.
        """
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache miss: %s", key)
            return MISS

        age = self._clock() - entry.stored_at
        if age > ttl_ms:
            del self._entries[key]
            logger.debug("Cache expired: %s (age %.0f ms > %s ms)", key, age, ttl_ms)
            return MISS

        logger.debug("Cache hit: %s", key)
        return copy.deepcopy(entry.payload)

    def set(self, key: str, payload: Any) -> None:
        """Store payload under key, replacing any previous entry."""
        self._entries[key] = CacheEntry(
            key=key,
            payload=copy.deepcopy(payload),
            stored_at=self._clock(),
        )

    def invalidate(self, pattern: Optional[str] = None) -> None:
        """
        Drop every entry, or only those whose key contains pattern.

        Matching is substring containment, so "portfolio" drops
        "portfolio:summary" and any other key in that namespace.
        """
        if not pattern:
            removed = len(self._entries)
            self._entries.clear()
            logger.debug("Cache cleared (%d entries)", removed)
            return

        stale = [key for key in self._entries if pattern in key]
        for key in stale:
            del self._entries[key]
        logger.debug("Cache invalidated %d entries matching %r", len(stale), pattern)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
