"""Time sources for the cache.

All timestamps are plain floats in milliseconds. The cache only ever calls
``now()``, so anything with that method can stand in for the wall clock.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class SystemClock:
    """Wall clock: milliseconds since the Unix epoch."""

    def now(self) -> float:
        return time.time() * 1000


class ManualClock:
    """Clock that only moves when told to. Meant for tests."""

    def __init__(self, start: float = 0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        """Move time forward by ``ms`` and return the new instant."""
        if ms < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += ms
        return self._now

    def set(self, instant: float) -> None:
        self._now = float(instant)
