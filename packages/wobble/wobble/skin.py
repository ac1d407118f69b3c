"""Curve skinning: smooth quadratic outlines through a ring of points."""
from __future__ import annotations

from typing import Sequence

from wobble.types import InvalidGeometry, Point, Surface

MIN_POINTS = 3


def mid_anchors(points: Sequence[Point]) -> list[Point]:
    """Average each consecutive pair, wrapping the last point back to the first."""
    n = len(points)
    mids: list[Point] = []
    for i in range(n):
        (x0, y0), (x1, y1) = points[i], points[(i + 1) % n]
        mids.append(((x0 + x1) / 2, (y0 + y1) / 2))
    return mids


def skin(surface: Surface, points: Sequence[Point], closed: bool = True) -> None:
    """Extend the surface's active path with a smooth curve through ``points``.

    Each original point bends a quadratic segment that starts and ends on
    the midpoints of its neighbours, so the outline passes through the
    mid-anchors and is tangent-continuous there. Open skins start on the
    first point and finish on the last one with straight lead-in/lead-out
    edges. Nothing is stroked or filled here.
    """
    n = len(points)
    if n < MIN_POINTS:
        raise InvalidGeometry(
            n, f"Cannot skin {n} point(s), need at least {MIN_POINTS}"
        )
    mids = mid_anchors(points)

    if closed:
        surface.move_to(*mids[0])
        for i in range(1, n):
            cx, cy = points[i]
            surface.quadratic_curve_to(cx, cy, *mids[i])
        cx, cy = points[0]
        surface.quadratic_curve_to(cx, cy, *mids[0])
        return

    surface.move_to(*points[0])
    surface.line_to(*mids[0])
    for i in range(1, n - 1):
        cx, cy = points[i]
        surface.quadratic_curve_to(cx, cy, *mids[i])
    surface.line_to(*points[n - 1])
