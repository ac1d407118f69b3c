"""Easing functions for eased state transitions."""
from __future__ import annotations

import math
from typing import Callable


def clamp_fraction(t: float) -> float:
    if t > 1.0:
        return 1.0
    if t < 0.0:
        return 0.0
    return t


def linear(t: float) -> float:
    return t


def ease_in_out_circ(t: float) -> float:
    """Two quarter-circle arcs meeting at (0.5, 0.5)."""
    if t < 0.5:
        return (1 - math.sqrt(max(0.0, 1 - (2 * t) ** 2))) / 2
    return (math.sqrt(max(0.0, 1 - (-2 * t + 2) ** 2)) + 1) / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in_out_circ": ease_in_out_circ,
}


def time_fraction(now: float, recorded: float, duration: float) -> float:
    """Share of ``duration`` elapsed since ``recorded``, clamped to [0, 1]."""
    return clamp_fraction((now - recorded) / duration)
