"""Per-user personalization history.

Each analysis appends a ``HistoryEntry`` for the issuing user; the oldest
entries are evicted once a user exceeds ``limit``. Success factors recorded
through ``mark_successful`` feed ``success_recommendations`` and are capped
at the same ``limit`` per user.

NOT durable: the store lives for the process. Callers that want history
across restarts persist ``snapshot()`` themselves.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import Counter, deque
from dataclasses import dataclass, field

from dreamboard.models.vocab import Category, Emotion

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class HistoryEntry:
    """One analysed dream, reduced to what personalization needs."""

    dream_id: str | None
    title: str
    categories: tuple[Category, ...]
    emotions: tuple[Emotion, ...]
    timestamp: float = field(default_factory=time.time)


class PersonalizationStore:
    """Thread-safe, bounded, per-user analysis history."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._lock = threading.Lock()
        self._history: dict[str, deque[HistoryEntry]] = {}
        self._successes: dict[str, deque[str]] = {}

    def record(self, user_id: str, entry: HistoryEntry) -> None:
        with self._lock:
            entries = self._history.setdefault(user_id, deque(maxlen=self.limit))
            entries.append(entry)
        logger.debug("Recorded history for user %s (%d entries)", user_id, len(entries))

    def snapshot(self, user_id: str) -> list[HistoryEntry]:
        """Copy of the user's history, oldest first."""
        with self._lock:
            return list(self._history.get(user_id, ()))

    def mark_successful(self, user_id: str, factors: list[str]) -> None:
        with self._lock:
            self._successes.setdefault(user_id, deque(maxlen=self.limit)).extend(factors)

    def success_factors(self, user_id: str) -> list[str]:
        with self._lock:
            return list(self._successes.get(user_id, ()))

    def success_recommendations(self, user_id: str, limit: int = 5) -> list[str]:
        """Most frequently recorded success factors, ties in first-seen order."""
        counts = Counter(self.success_factors(user_id))
        return [factor for factor, _ in counts.most_common(limit)]

    def clear(self) -> None:
        with self._lock:
            self._history.clear()
            self._successes.clear()
