"""In-memory, time-boxed cache for API responses."""

import copy
import json
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached response and when it was stored."""

    key: str
    payload: Any
    stored_at: float


class ResponseCache:
    """Memoizes responses for a fixed duration.

    Expired entries are dropped lazily when read, or all at once by
    clear_expired(). There is no background timer. Identical requests made
    concurrently are not merged: each one misses and hits the network.
    """

    DEFAULT_MAX_AGE = 5 * 60  # seconds

    def __init__(
        self,
        max_age: float = DEFAULT_MAX_AGE,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            max_age: Seconds an entry stays valid
            max_entries: Optional bound; the oldest entry is evicted first.
                None keeps the cache unbounded.
            clock: Time source returning seconds (for testing)
        """
        if max_age < 0:
            raise ValueError(f"max_age must be >= 0, got {max_age}")
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.max_age = max_age
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    @staticmethod
    def generate_key(endpoint: str, params: Any) -> str:
        """Build a cache key from an endpoint path and request parameters.

        Parameters are serialized with sorted keys, so dicts that differ only
        in key order share a key.
        """
        serialized = json.dumps(params, sort_keys=True, separators=(",", ":"))
        return f"{endpoint}:{serialized}"

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at > self.max_age

    def get(self, key: str) -> Any | None:
        """Get a cached payload, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._is_expired(entry, self._clock()):
            logger.debug(f"Cache expired: {key}")
            del self._entries[key]
            return None

        return copy.deepcopy(entry.payload)

    def set(self, key: str, value: Any) -> None:
        """Store a payload under key, replacing any previous entry."""
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(
            key=key,
            payload=copy.deepcopy(value),
            stored_at=self._clock(),
        )
        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache full, evicted: {evicted}")

    def clear_expired(self) -> int:
        """Remove all expired entries.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [
            key for key, entry in self._entries.items()
            if self._is_expired(entry, now)
        ]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
