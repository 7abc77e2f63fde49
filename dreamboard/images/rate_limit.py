"""Per-provider minimum-interval throttle.

A call inside the interval is refused rather than delayed: the caller skips
that provider for the request.
"""

from __future__ import annotations

import threading
import time
from typing import Callable


class RateLimiter:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._last_call: dict[str, float] = {}

    def try_acquire(self, provider: str, min_interval: float) -> bool:
        """Record a call and return True if ``min_interval`` has elapsed since the last one."""
        with self._lock:
            now = self._clock()
            last = self._last_call.get(provider)
            if last is not None and now - last < min_interval:
                return False
            self._last_call[provider] = now
            return True

    def reset(self) -> None:
        with self._lock:
            self._last_call.clear()
