"""
Time-bounded result cache for aggregation runs.

The pipeline itself keeps no state between runs. Callers that want to
avoid re-querying providers for the same fixture own a ResultCache and
pass it to run_aggregation().
"""

from __future__ import annotations

import time
from typing import Callable

from .core.types import AggregationResult


CacheKey = tuple[str, str]


class ResultCache:
    """In-memory cache keyed by (home canonical, away canonical).

    Attributes:
        ttl_seconds: Lifetime of an entry
    """

    def __init__(self, ttl_seconds: float = 300.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[CacheKey, tuple[float, AggregationResult]] = {}

    def get(self, key: CacheKey) -> AggregationResult | None:
        """Return the cached result, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, result = entry
        if self._clock() - stored_at > self.ttl_seconds:
            del self._entries[key]
            return None
        return result

    def put(self, key: CacheKey, result: AggregationResult) -> None:
        """Store a result and drop every entry that has already expired."""
        now = self._clock()
        expired = [k for k, (stored_at, _) in self._entries.items() if now - stored_at > self.ttl_seconds]
        for stale in expired:
            del self._entries[stale]
        self._entries[key] = (now, result)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
