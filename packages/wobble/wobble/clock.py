"""Millisecond time sources for eased transitions."""
from __future__ import annotations

import time


class SystemClock:
    """Monotonic wall clock in milliseconds."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock that only moves when told to. Used by tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("cannot advance a clock backwards")
        self._now += ms
        return self._now

    def reset(self, now: float = 0.0) -> None:
        self._now = now
