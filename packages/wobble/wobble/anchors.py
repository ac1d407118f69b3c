"""Anchor ring generation for one animation frame."""
from __future__ import annotations

import math
from typing import Sequence

from wobble.types import Point


def advance_phase(
    theta: float,
    theta_ramp: float,
    theta_delta: float,
    ramp_dest: float,
    ramp_damp: float,
) -> tuple[float, float]:
    """Return (theta, theta_ramp) after one frame.

    The ramp closes a fixed share of its remaining distance each frame, so
    it approaches ``ramp_dest`` asymptotically.
    """
    theta_ramp += (ramp_dest - theta_ramp) / ramp_damp
    theta += theta_delta
    return theta, theta_ramp


def generate_anchors(
    surface_width: float,
    base_radius: float,
    radius_offset: float,
    segments: int,
    step: float,
    radii: Sequence[float],
    theta_off: Sequence[float],
    theta: float,
    theta_ramp: float,
) -> list[Point]:
    """Sample the wobbling ring, pinned to the surface's right edge.

    The first anchor is fixed at ``(surface_width, base_radius)``. The
    samples run ``i = 0 .. segments + 2`` inclusive; ``radii`` and
    ``theta_off`` are rings, so the last sample wraps to their start.
    """
    anchors: list[Point] = [(surface_width, base_radius)]
    ring = len(radii)
    for i in range(segments + 3):
        sine = math.sin(theta_off[i % ring] + theta + theta_ramp)
        radius = base_radius + radius_offset + radii[i % ring] * sine
        x = radius * math.sin(step * i)
        y = radius * math.cos(step * i)
        anchors.append((surface_width - x, y))
    return anchors


def flatten(points: Sequence[Point]) -> list[float]:
    """Flatten points into ``[x0, y0, x1, y1, ...]``."""
    return [c for point in points for c in point]
