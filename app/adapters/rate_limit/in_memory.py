"""In-memory fixed-window rate limiter.

Notes:
- Per-process only: running multiple workers multiplies the effective limit.
- Thread-safe: uses a lock around shared state.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult


@dataclass
class _WindowState:
    window_start: int
    count: int


class InMemoryFixedWindowRateLimiter(AbstractRateLimiter):
    """Rate limiter using a fixed time window per key.

    Allows at most ``limit`` checks per key inside each window of
    ``window_seconds``; the counter resets when a new window starts.

    Important:
        This limiter is per-process only. If the API runs with multiple
        workers, each worker enforces its own independent limits.
    """

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the in-memory rate limiter.

        Args:
            limit: Maximum number of allowed checks per window.
            window_seconds: Size of the fixed window in seconds.
            clock: Time source function returning UNIX time in seconds.

        Raises:
            ValueError: If limit or window_seconds are invalid.
        """
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if window_seconds < 1:
            raise ValueError("window_seconds must be >= 1")

        self._limit = limit
        self._window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.RLock()
        self._state_by_key: dict[str, _WindowState] = {}
        self._current_window: int | None = None

    def _window_start(self, now: float) -> int:
        return int(now // self._window_seconds) * self._window_seconds

    def _prune_stale(self, window_start: int) -> None:
        # Caller holds the lock.
        stale = [key for key, state in self._state_by_key.items() if state.window_start < window_start]
        for key in stale:
            del self._state_by_key[key]

    async def check(self, key: str) -> RateLimitResult:
        """Consume one unit of budget for ``key``.

        Raises:
            ValueError: If key is empty.
        """
        if not key:
            raise ValueError("key must be a non-empty string")

        window_start = self._window_start(self._clock())

        with self._lock:
            if window_start != self._current_window:
                self._prune_stale(window_start)
                self._current_window = window_start

            state = self._state_by_key.get(key)
            if state is None or state.window_start != window_start:
                state = _WindowState(window_start=window_start, count=0)
                self._state_by_key[key] = state

            if state.count < self._limit:
                state.count += 1
                return RateLimitResult(success=True)

            return RateLimitResult(success=False)
