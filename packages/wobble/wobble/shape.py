"""Shape state machine: eased expansion and collapse of the blob radius."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from wobble.constants import SCALE_DURATION
from wobble.easing import clamp_fraction, ease_in_out_circ, time_fraction


class ShapeState(Enum):
    EXPANDED = 0
    EXPANDING = 1
    REGULAR = 2
    COLLAPSING = 3


@dataclass(frozen=True)
class ShapeTrack:
    """Current shape state, its transition bookkeeping, and the resulting offset."""

    state: ShapeState = ShapeState.REGULAR
    recorded_time: float = 0.0
    last_fraction: float = 0.0
    current_fraction: float = 0.0
    radius_offset: float = 0.0

    @property
    def animating(self) -> bool:
        return self.state in (ShapeState.EXPANDING, ShapeState.COLLAPSING)


def cue_expansion(track: ShapeTrack, now: float) -> ShapeTrack:
    if track.state in (ShapeState.EXPANDED, ShapeState.EXPANDING):
        return track
    return replace(
        track,
        state=ShapeState.EXPANDING,
        recorded_time=now,
        last_fraction=track.current_fraction,
    )


def cue_collapse(track: ShapeTrack, now: float) -> ShapeTrack:
    if track.state in (ShapeState.REGULAR, ShapeState.COLLAPSING):
        return track
    return replace(
        track,
        state=ShapeState.COLLAPSING,
        recorded_time=now,
        last_fraction=track.current_fraction,
    )


def offset_for(fraction: float, base_radius: float, max_radius: float) -> float:
    return (max_radius - base_radius) * ease_in_out_circ(fraction)


def advance(
    track: ShapeTrack,
    now: float,
    *,
    base_radius: float,
    max_radius: float,
    diagonal: float,
    duration: float = SCALE_DURATION,
) -> ShapeTrack:
    """Advance one tick. Resting states come back unchanged.

    A reversal restarts from ``last_fraction`` (the fraction at cue time),
    so the radius offset is continuous across a cue.
    """
    elapsed = time_fraction(now, track.recorded_time, duration)

    if track.state is ShapeState.EXPANDING:
        # A finished ramp counts as maximized; the offset alone never
        # reaches the diagonal.
        if track.radius_offset >= diagonal or track.current_fraction >= 1.0:
            return replace(
                track,
                state=ShapeState.EXPANDED,
                radius_offset=max_radius,
                current_fraction=1.0,
            )
        current = clamp_fraction(elapsed + track.last_fraction)
        return replace(
            track,
            current_fraction=current,
            radius_offset=offset_for(current, base_radius, max_radius),
        )

    if track.state is ShapeState.COLLAPSING:
        if track.current_fraction == 0.0:
            return replace(track, state=ShapeState.REGULAR, radius_offset=0.0)
        current = clamp_fraction(track.last_fraction - elapsed)
        return replace(
            track,
            current_fraction=current,
            radius_offset=offset_for(current, base_radius, max_radius),
        )

    return track
