"""PygameCanvas - path-building drawing surface on top of pygame."""
from __future__ import annotations

from typing import Callable

import pygame

from wobble.types import Point

# Line segments used to flatten one quadratic curve.
CURVE_STEPS = 12

ResizeHook = Callable[[tuple[int, int]], pygame.Surface]


def _new_layer(size: tuple[int, int]) -> pygame.Surface:
    return pygame.Surface(size, pygame.SRCALPHA)


def quadratic_points(p0: Point, control: Point, p1: Point, steps: int = CURVE_STEPS) -> list[Point]:
    """Flatten a quadratic Bezier into ``steps`` points, excluding ``p0``."""
    (x0, y0), (cx, cy), (x1, y1) = p0, control, p1
    points: list[Point] = []
    for k in range(1, steps + 1):
        t = k / steps
        u = 1 - t
        points.append((
            u * u * x0 + 2 * u * t * cx + t * t * x1,
            u * u * y0 + 2 * u * t * cy + t * t * y1,
        ))
    return points


def blur(layer: pygame.Surface, radius: float) -> pygame.Surface:
    """Cheap box-ish blur: shrink then grow back with smoothscale."""
    w, h = layer.get_size()
    factor = max(1.0, radius / 2)
    small = (max(1, int(w / factor)), max(1, int(h / factor)))
    return pygame.transform.smoothscale(pygame.transform.smoothscale(layer, small), (w, h))


class PygameCanvas:
    """Canvas-like drawing surface: build a path, then fill it with an optional shadow.

    Assigning ``width`` or ``height`` replaces the target surface through
    ``on_resize`` (an offscreen alpha layer by default; pass
    ``pygame.display.set_mode`` for a window).
    """

    def __init__(
        self,
        target: pygame.Surface,
        *,
        on_resize: ResizeHook | None = None,
        clear_color: tuple[int, int, int, int] = (0, 0, 0, 0),
        curve_steps: int = CURVE_STEPS,
    ) -> None:
        self._target = target
        self._on_resize: ResizeHook = on_resize if on_resize is not None else _new_layer
        self._subpaths: list[list[Point]] = []
        self.clear_color = clear_color
        self.curve_steps = curve_steps
        self.fill_style = "black"
        self.shadow_blur = 0.0
        self.shadow_color = "black"

    @property
    def target(self) -> pygame.Surface:
        return self._target

    @property
    def width(self) -> int:
        return self._target.get_width()

    @width.setter
    def width(self, value: int) -> None:
        self._resize((int(value), self.height))

    @property
    def height(self) -> int:
        return self._target.get_height()

    @height.setter
    def height(self, value: int) -> None:
        self._resize((self.width, int(value)))

    def _resize(self, size: tuple[int, int]) -> None:
        if size != self._target.get_size():
            self._target = self._on_resize(size)

    # -- Path building --

    @property
    def subpaths(self) -> list[list[Point]]:
        return self._subpaths

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append((x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(cpx, cpy)
        path = self._subpaths[-1]
        path.extend(quadratic_points(path[-1], (cpx, cpy), (x, y), self.curve_steps))

    # -- Painting --

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._target.fill(self.clear_color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def fill(self) -> None:
        polygons = [path for path in self._subpaths if len(path) >= 3]
        if not polygons:
            return

        if self.shadow_blur > 0:
            shadow = _new_layer(self._target.get_size())
            shadow_color = pygame.Color(self.shadow_color)
            for path in polygons:
                pygame.draw.polygon(shadow, shadow_color, path)
            self._target.blit(blur(shadow, self.shadow_blur), (0, 0))

        color = pygame.Color(self.fill_style)
        for path in polygons:
            pygame.draw.polygon(self._target, color, path)
