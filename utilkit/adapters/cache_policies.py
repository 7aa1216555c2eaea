"""
Cache eviction policies for memoize.

Implements the CachePolicyPort interface.

- UnboundedPolicy: never evicts (the classic memoize cache)
- LRUPolicy: evicts the least recently used key beyond max_size
- TTLPolicy: entries expire ttl_seconds after they were stored
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

from utilkit.adapters.clock import SystemClock
from utilkit.core.ports.time import ClockPort

logger = logging.getLogger(__name__)


class UnboundedPolicy:
    """Plain dictionary cache. Grows for the lifetime of the wrapper."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> tuple[bool, Any]:
        if key in self._entries:
            return True, self._entries[key]
        return False, None

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class LRUPolicy:
    """Least-recently-used cache with a fixed capacity."""

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._max_size = max_size
        self._entries: OrderedDict[str, Any] = OrderedDict()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: str) -> tuple[bool, Any]:
        if key not in self._entries:
            return False, None
        self._entries.move_to_end(key)
        return True, self._entries[key]

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("LRU cache evicted key %s", evicted)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class TTLPolicy:
    """
    Time-to-live cache.

    Expiry is measured on the clock's monotonic reading. Expired entries
    are dropped lazily on lookup and on insert.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: ClockPort | None = None,
        max_size: int | None = None,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._ttl = ttl_seconds
        self._clock = clock or SystemClock()
        self._max_size = max_size
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()

    def get(self, key: str) -> tuple[bool, Any]:
        entry = self._entries.get(key)
        if entry is None:
            return False, None
        expires_at, value = entry
        if self._clock.monotonic() >= expires_at:
            del self._entries[key]
            logger.debug("TTL cache expired key %s", key)
            return False, None
        return True, value

    def put(self, key: str, value: Any) -> None:
        now = self._clock.monotonic()
        self._purge(now)
        self._entries.pop(key, None)
        self._entries[key] = (now + self._ttl, value)
        if self._max_size is not None:
            while len(self._entries) > self._max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("TTL cache evicted key %s (capacity)", evicted)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _purge(self, now: float) -> None:
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]
        if expired:
            logger.debug("TTL cache purged %d expired keys", len(expired))
