"""Debouncer - run a callback once input has been quiet for a while."""
from __future__ import annotations

from typing import Callable

from wobble.types import InvalidConfiguration, TimeSource


class Debouncer:
    """One-shot delayed call. Each trigger cancels the pending call and restarts the delay."""

    def __init__(self, delay: float, callback: Callable[[], None], clock: TimeSource) -> None:
        if delay <= 0:
            raise InvalidConfiguration("debounce delay must be positive")
        self._delay = delay
        self._callback = callback
        self._clock = clock
        self._due: float | None = None

    @property
    def pending(self) -> bool:
        return self._due is not None

    def trigger(self) -> None:
        self._due = self._clock.now() + self._delay

    def cancel(self) -> None:
        self._due = None

    def poll(self) -> bool:
        """Fire the callback if its delay has passed. Returns True when it fired."""
        if self._due is None or self._clock.now() < self._due:
            return False
        self._due = None
        self._callback()
        return True
