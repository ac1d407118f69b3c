"""BlobContext - owns the single Blob and the inputs that feed it."""
from __future__ import annotations

import logging
import random

from wobble.blob import Blob
from wobble.clock import SystemClock
from wobble.constants import (
    DEFAULT_MIN_DEVIATION,
    DEFAULT_SECTOR_ANGLE,
    DEFAULT_SEGMENTS,
    REACTIVE_POLL_INTERVAL,
    RESIZE_DEBOUNCE,
    WIDTH_BREAKPOINT,
)
from wobble.types import Surface, TimeSource
from wobble_host.debounce import Debouncer
from wobble_host.loop import FrameContext, FrameLoop
from wobble_host.motion import MotionSampler

logger = logging.getLogger(__name__)


class BlobContext:
    """Process-lifetime owner of the blob, the resize debouncer, and the motion slot.

    Hosts push viewport sizes through ``on_resize`` and pointer positions
    through ``on_pointer``; ``frame`` is the per-frame system that drains
    both and then runs ``energize``, ``animate`` and ``update`` in order.
    """

    def __init__(
        self,
        surface: Surface,
        *,
        segments: int = DEFAULT_SEGMENTS,
        sector_angle: float = DEFAULT_SECTOR_ANGLE,
        min_deviation: float = DEFAULT_MIN_DEVIATION,
        clock: TimeSource | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
        resize_delay: float = RESIZE_DEBOUNCE,
        poll_interval: float = REACTIVE_POLL_INTERVAL,
        width_breakpoint: int = WIDTH_BREAKPOINT,
    ) -> None:
        self._clock: TimeSource = clock if clock is not None else SystemClock()
        self._size = (surface.width, surface.height)
        self._width_breakpoint = width_breakpoint
        self._blob = Blob(
            segments,
            sector_angle,
            min_deviation,
            surface,
            clock=self._clock,
            rng=rng,
            seed=seed,
            viewport=self.viewport,
        )
        self._resizer = Debouncer(resize_delay, self._commit_resize, self._clock)
        self._motion = MotionSampler(self._clock, poll_interval)

    @property
    def blob(self) -> Blob:
        return self._blob

    @property
    def resize_pending(self) -> bool:
        return self._resizer.pending

    def viewport(self) -> tuple[int, int]:
        return self._size

    # -- Producers --

    def on_resize(self, width: int, height: int) -> None:
        """Record the new viewport size and (re)schedule a geometry commit."""
        self._size = (width, height)
        if width < self._width_breakpoint:
            return
        self._resizer.trigger()

    def on_pointer(self, x: float, y: float) -> None:
        self._motion.record(x, y)

    # -- Consumer --

    def _commit_resize(self) -> None:
        self._blob.update_values()
        logger.debug("resize committed at %dx%d", *self._size)

    def frame(self, ctx: FrameContext | None = None) -> None:
        self._resizer.poll()
        self._motion.poll(self._blob.reactive_px)
        self._blob.energize()
        self._blob.animate()
        self._blob.update()

    def install(self, loop: FrameLoop) -> None:
        loop.add_system(self.frame)
