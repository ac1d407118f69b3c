"""wobble - A procedurally animated organic blob for 2D drawing surfaces."""
from __future__ import annotations

from wobble.blob import Blob
from wobble.clock import ManualClock, SystemClock
from wobble.easing import EASINGS, clamp_fraction, ease_in_out_circ
from wobble.energy import EnergyState, EnergyTrack
from wobble.shape import ShapeState, ShapeTrack
from wobble.skin import mid_anchors, skin
from wobble.types import InvalidConfiguration, InvalidGeometry, Point, Surface

__all__ = [
    "Blob",
    "SystemClock",
    "ManualClock",
    "EASINGS",
    "clamp_fraction",
    "ease_in_out_circ",
    "ShapeState",
    "ShapeTrack",
    "EnergyState",
    "EnergyTrack",
    "skin",
    "mid_anchors",
    "Point",
    "Surface",
    "InvalidGeometry",
    "InvalidConfiguration",
]
