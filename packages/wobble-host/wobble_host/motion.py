"""Pointer motion sampling into a scalar speed."""
from __future__ import annotations

import math
import threading
from typing import Callable

from wobble.constants import REACTIVE_POLL_INTERVAL
from wobble.types import InvalidConfiguration, Point, TimeSource


class MotionSampler:
    """Latest-pointer slot, diffed into a speed once per ``interval`` ms.

    ``record`` may be called from any thread; only the frame loop calls
    ``poll``. Speed is pixels moved between consecutive samples divided by
    the interval.
    """

    def __init__(self, clock: TimeSource, interval: float = REACTIVE_POLL_INTERVAL) -> None:
        if interval <= 0:
            raise InvalidConfiguration("poll interval must be positive")
        self._clock = clock
        self._interval = interval
        self._lock = threading.Lock()
        self._current: Point | None = None
        self._last: Point | None = None
        self._next_due = clock.now() + interval

    @property
    def interval(self) -> float:
        return self._interval

    def record(self, x: float, y: float) -> None:
        with self._lock:
            self._current = (x, y)

    def sample(self) -> float | None:
        """Diff the latest position against the previous sample. None until two exist."""
        with self._lock:
            current = self._current
        last, self._last = self._last, current
        if last is None or current is None:
            return None
        movement = math.hypot(abs(current[0] - last[0]), abs(current[1] - last[1]))
        return movement / self._interval

    def poll(self, on_speed: Callable[[float], None]) -> bool:
        """Take at most one sample if the interval has elapsed. Returns True when sampled."""
        now = self._clock.now()
        if now < self._next_due:
            return False
        self._next_due = now + self._interval
        speed = self.sample()
        if speed is not None:
            on_speed(speed)
        return True
