"""Shared fixtures for wobble tests."""
from __future__ import annotations

import pytest

from wobble import ManualClock


class RecordingSurface:
    """Drawing surface double that records every call in order."""

    def __init__(self, width: int = 600, height: int = 800) -> None:
        self.width = width
        self.height = height
        self.fill_style = ""
        self.shadow_blur = 0.0
        self.shadow_color = ""
        self.calls: list[tuple] = []

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self.calls.append(("quadratic_curve_to", cpx, cpy, x, y))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("clear_rect", x, y, w, h))

    def fill(self) -> None:
        self.calls.append(("fill", self.fill_style, self.shadow_blur, self.shadow_color))


@pytest.fixture
def surface() -> RecordingSurface:
    """600x800 surface: diagonal 1000."""
    return RecordingSurface()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def make_surface():
    """Factory for extra surfaces within one test."""
    return RecordingSurface
