"""Blob - the animated shape, its two state machines, and per-frame rendering."""
from __future__ import annotations

import logging
import math
import os
import random

from wobble import energy, shape
from wobble.anchors import advance_phase, flatten, generate_anchors
from wobble.clock import SystemClock
from wobble.constants import (
    BASE_RADIUS_FACTOR,
    BUMP_RADIUS_DIVISOR,
    FILL_COLOR,
    RAMP_DAMP,
    RAMP_SETTLED,
    SHADOW_BLUR,
    SHADOW_COLOR,
    THETA_RAMP_DEST,
)
from wobble.energy import EnergyState, EnergyTrack
from wobble.shape import ShapeState, ShapeTrack
from wobble.skin import skin
from wobble.types import InvalidConfiguration, Point, Surface, TimeSource, Viewport

logger = logging.getLogger(__name__)

TAU = math.pi * 2


class Blob:
    """A wobbling ring pinned to the top-right corner of a drawing surface.

    ``segments`` sets the detail level, ``sector_angle`` the arc the ring
    covers and ``min_deviation`` the lower bound of each segment's phase
    offset (clamped to 2*pi). The surface is resized to ``viewport()`` on
    every geometry refresh; by default the viewport is the surface's own
    current size.
    """

    def __init__(
        self,
        segments: int,
        sector_angle: float,
        min_deviation: float,
        surface: Surface,
        *,
        clock: TimeSource | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        viewport: Viewport | None = None,
        fill_color: str = FILL_COLOR,
    ) -> None:
        if not isinstance(segments, int) or segments <= 0:
            raise InvalidConfiguration(f"segments must be a positive integer, got {segments!r}")
        if not math.isfinite(sector_angle):
            raise InvalidConfiguration(f"sector_angle must be finite, got {sector_angle!r}")
        if not math.isfinite(min_deviation):
            raise InvalidConfiguration(f"min_deviation must be finite, got {min_deviation!r}")
        if min_deviation > TAU:
            min_deviation = TAU

        self._surface = surface
        self._clock: TimeSource = clock if clock is not None else SystemClock()
        self._viewport: Viewport = (
            viewport if viewport is not None else lambda: (surface.width, surface.height)
        )
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed
        self.fill_color = fill_color

        self.segments = segments
        self.step = sector_angle / segments
        self.min_deviation = min_deviation
        self.anchors: list[Point] = []

        self.base_radius = 0.0
        self.update_values()

        self.bump_radius = self.base_radius / BUMP_RADIUS_DIVISOR
        self.half_bump_radius = self.bump_radius / 2

        self.radii: list[float] = []
        self.theta_off: list[float] = []
        for _ in range(segments + 2):
            self.radii.append(rng.random() * self.bump_radius - self.half_bump_radius)
            self.theta_off.append(rng.random() * (TAU - min_deviation) + min_deviation)

        self.theta = 0.0
        self.theta_ramp = 0.0
        self.theta_ramp_dest = THETA_RAMP_DEST
        self.ramp_damp = RAMP_DAMP

        self.shape = ShapeTrack()
        self.energy = EnergyTrack(theta_delta=self.base_theta_delta)

    # -- Read-only views --

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def seed(self) -> int | None:
        """Seed the ring was drawn from, or None when an rng was injected."""
        return self._seed

    @property
    def state(self) -> ShapeState:
        return self.shape.state

    @property
    def energy_state(self) -> EnergyState:
        return self.energy.state

    @property
    def radius_offset(self) -> float:
        return self.shape.radius_offset

    @property
    def current_time_fraction(self) -> float:
        return self.shape.current_fraction

    @property
    def current_theta_fraction(self) -> float:
        return self.energy.current_fraction

    @property
    def theta_delta(self) -> float:
        return self.energy.theta_delta

    @property
    def diagonal(self) -> float:
        return math.hypot(self._surface.width, self._surface.height)

    @property
    def max_radius(self) -> float:
        return self.diagonal + self.bump_radius

    @property
    def base_theta_delta(self) -> float:
        return energy.base_theta_delta(self.diagonal)

    @property
    def max_theta_delta(self) -> float:
        return energy.max_theta_delta(self.diagonal)

    @property
    def flat_anchors(self) -> list[float]:
        return flatten(self.anchors)

    def is_animating(self) -> bool:
        return self.shape.animating

    def should_refresh(self) -> bool:
        return self.is_animating() or self.theta_ramp < self.theta_ramp_dest * RAMP_SETTLED

    # -- Geometry --

    def update_values(self) -> None:
        """Resize the surface to the viewport and recompute the base radius."""
        width, height = self._viewport()
        self._surface.width = width
        self._surface.height = height
        self.base_radius = self.diagonal * BASE_RADIUS_FACTOR

    def update_anchors(self) -> list[Point]:
        self.theta, self.theta_ramp = advance_phase(
            self.theta,
            self.theta_ramp,
            self.theta_delta,
            self.theta_ramp_dest,
            self.ramp_damp,
        )
        self.anchors = generate_anchors(
            self._surface.width,
            self.base_radius,
            self.radius_offset,
            self.segments,
            self.step,
            self.radii,
            self.theta_off,
            self.theta,
            self.theta_ramp,
        )
        return self.anchors

    # -- Per-frame steps --

    def update(self) -> None:
        """Redraw the blob. Skipped while fully expanded over the surface."""
        if self.shape.state is ShapeState.EXPANDED:
            return

        surface = self._surface
        surface.clear_rect(0, 0, surface.width, surface.height)

        if self.should_refresh():
            self.update_values()

        self.update_anchors()

        surface.begin_path()
        surface.move_to(0, 0)
        skin(surface, self.anchors, closed=False)
        surface.line_to(surface.width, 0)
        surface.fill_style = self.fill_color
        surface.shadow_blur = SHADOW_BLUR
        surface.shadow_color = SHADOW_COLOR
        surface.fill()

    def animate(self) -> None:
        if not self.shape.animating:
            return
        previous = self.shape.state
        self.shape = shape.advance(
            self.shape,
            self._clock.now(),
            base_radius=self.base_radius,
            max_radius=self.max_radius,
            diagonal=self.diagonal,
        )
        if self.shape.state is not previous:
            logger.debug("shape %s -> %s", previous.name, self.shape.state.name)

    def energize(self) -> None:
        previous = self.energy.state
        self.energy = energy.advance(
            self.energy,
            self._clock.now(),
            base_delta=self.base_theta_delta,
            max_delta=self.max_theta_delta,
        )
        if self.energy.state is not previous:
            logger.debug("energy %s -> %s", previous.name, self.energy.state.name)

    # -- Triggers --

    def cue_expansion(self) -> None:
        self.shape = shape.cue_expansion(self.shape, self._clock.now())

    def cue_collapse(self) -> None:
        self.shape = shape.cue_collapse(self.shape, self._clock.now())

    def reactive_px(self, speed: float) -> None:
        """Feed one motion-speed sample (pixels per millisecond)."""
        previous = self.energy.state
        self.energy = energy.react(self.energy, speed, self._clock.now(), self.diagonal)
        if self.energy.state is not previous:
            logger.debug(
                "energy %s -> %s (speed %.4f)", previous.name, self.energy.state.name, speed
            )
