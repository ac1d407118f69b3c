"""wobble-host - Frame loop, input plumbing, and pygame surface for wobble."""
from __future__ import annotations

from wobble_host.canvas import PygameCanvas
from wobble_host.context import BlobContext
from wobble_host.debounce import Debouncer
from wobble_host.loop import FrameContext, FrameLoop
from wobble_host.motion import MotionSampler

__all__ = [
    "BlobContext",
    "Debouncer",
    "FrameContext",
    "FrameLoop",
    "MotionSampler",
    "PygameCanvas",
]
