"""Shared type aliases, protocols, and errors for wobble."""
from __future__ import annotations

from typing import Callable, Protocol

Point = tuple[float, float]

# Returns the (width, height) the drawing surface should be resized to.
Viewport = Callable[[], tuple[int, int]]


class Surface(Protocol):
    """Minimal 2D drawing surface with a path-building API."""

    width: int
    height: int
    fill_style: str
    shadow_blur: float
    shadow_color: str

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None: ...

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill(self) -> None: ...


class TimeSource(Protocol):
    def now(self) -> float: ...


class InvalidGeometry(ValueError):
    """Raised when a point ring is too small to skin."""

    def __init__(self, count: int, message: str) -> None:
        self.count = count
        super().__init__(message)


class InvalidConfiguration(ValueError):
    """Raised on bad construction arguments (segments, angles, intervals)."""
