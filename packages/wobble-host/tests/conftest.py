"""Shared fixtures for wobble-host tests."""
from __future__ import annotations

import pytest

from wobble import ManualClock


class CountingSurface:
    """Drawing surface double that only counts fills and clears."""

    def __init__(self, width: int = 1000, height: int = 800) -> None:
        self.width = width
        self.height = height
        self.fill_style = ""
        self.shadow_blur = 0.0
        self.shadow_color = ""
        self.fills = 0
        self.clears = 0

    def begin_path(self) -> None:
        pass

    def move_to(self, x: float, y: float) -> None:
        pass

    def line_to(self, x: float, y: float) -> None:
        pass

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        pass

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.clears += 1

    def fill(self) -> None:
        self.fills += 1


@pytest.fixture
def surface() -> CountingSurface:
    return CountingSurface()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
