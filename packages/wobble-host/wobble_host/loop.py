"""FrameLoop - ordered per-frame systems, pacing, and stop requests."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from wobble.clock import SystemClock
from wobble.types import InvalidConfiguration, TimeSource


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    now: float
    request_stop: Callable[[], None]


FrameSystem = Callable[[FrameContext], None]


class FrameLoop:
    def __init__(
        self,
        fps: int = 60,
        clock: TimeSource | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps <= 0:
            raise InvalidConfiguration("fps must be positive")
        self._fps = fps
        self._interval = 1000.0 / fps
        self._clock: TimeSource = clock if clock is not None else SystemClock()
        self._sleep = sleep
        self._frame_number = 0
        self._systems: list[FrameSystem] = []
        self._stop_requested: bool = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def interval(self) -> float:
        """Frame budget in milliseconds."""
        return self._interval

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def add_system(self, system: FrameSystem) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._frame_number += 1
        ctx = FrameContext(
            frame_number=self._frame_number,
            now=self._clock.now(),
            request_stop=self._request_stop,
        )
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

    def run_forever(self) -> None:
        self._stop_requested = False
        while not self._stop_requested:
            start = self._clock.now()
            self._tick()
            if self._stop_requested:
                break
            elapsed = self._clock.now() - start
            sleep_time = self._interval - elapsed
            if sleep_time > 0:
                self._sleep(sleep_time / 1000.0)
