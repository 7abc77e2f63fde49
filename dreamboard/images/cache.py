"""Bounded TTL cache for ranked search results."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Hashable

from dreamboard.models.images import ImageCandidate

logger = logging.getLogger(__name__)


class SearchCache:
    """LRU cache keyed by the full search-parameter tuple.

    Entries expire ``ttl_seconds`` after insertion. All operations take the
    instance lock, so one cache can be shared by concurrent requests.
    """

    def __init__(
        self,
        max_entries: int = 256,
        ttl_seconds: float = 900.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"Cache size must be positive, got {max_entries}")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[Hashable, tuple[float, tuple[ImageCandidate, ...]]] = OrderedDict()

    def get(self, key: Hashable) -> list[ImageCandidate] | None:
        with self._lock:
            item = self._entries.get(key)
            if item is None:
                return None
            stored_at, results = item
            if self._clock() - stored_at > self.ttl_seconds:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return list(results)

    def put(self, key: Hashable, results: list[ImageCandidate]) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), tuple(results))
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cached search %s", evicted)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
