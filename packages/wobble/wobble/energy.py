"""Energy state machine: pointer motion drives the blob's angular speed."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from wobble.constants import (
    BASE_THETA_DELTA,
    BASE_THETA_SCALE,
    ENERGY_THRESHOLD,
    MAX_THETA_DELTA,
    MAX_THETA_MULTIPLIER,
    REACTIVE_SPEED_DURATION,
)
from wobble.easing import clamp_fraction, ease_in_out_circ, time_fraction


class EnergyState(Enum):
    REST = 0
    INCREASING = 1
    DECREASING = 2
    MAXIMUM = 3


@dataclass(frozen=True)
class EnergyTrack:
    """Current energy state, its transition bookkeeping, and the angular speed."""

    state: EnergyState = EnergyState.REST
    recorded_time: float = 0.0
    last_fraction: float = 0.0
    current_fraction: float = 0.0
    theta_delta: float = 0.0


def base_theta_delta(diagonal: float) -> float:
    return (diagonal / BASE_THETA_SCALE) * BASE_THETA_DELTA


def max_theta_delta(diagonal: float) -> float:
    return min(base_theta_delta(diagonal) * MAX_THETA_MULTIPLIER, MAX_THETA_DELTA)


def theta_delta_for(fraction: float, base_delta: float, max_delta: float) -> float:
    return (max_delta - base_delta) * ease_in_out_circ(fraction) + base_delta


def is_energetic(speed: float, diagonal: float) -> bool:
    """True when ``speed`` covers more than 0.1% of the diagonal per poll."""
    return abs(speed) > diagonal * ENERGY_THRESHOLD


def react(track: EnergyTrack, speed: float, now: float, diagonal: float) -> EnergyTrack:
    """Classify a motion sample. Ramp-ups are never re-triggered mid-ramp."""
    if track.state is EnergyState.INCREASING:
        return track

    if is_energetic(speed, diagonal):
        return replace(
            track,
            state=EnergyState.INCREASING,
            recorded_time=now,
            last_fraction=track.current_fraction,
        )

    if track.state in (EnergyState.DECREASING, EnergyState.REST):
        return track
    return replace(
        track,
        state=EnergyState.DECREASING,
        recorded_time=now,
        last_fraction=track.current_fraction,
    )


def advance(
    track: EnergyTrack,
    now: float,
    *,
    base_delta: float,
    max_delta: float,
    duration: float = REACTIVE_SPEED_DURATION,
) -> EnergyTrack:
    elapsed = time_fraction(now, track.recorded_time, duration)

    if track.state is EnergyState.INCREASING:
        current = clamp_fraction(track.last_fraction + elapsed)
        state = EnergyState.MAXIMUM if current >= 1.0 else EnergyState.INCREASING
        return replace(
            track,
            state=state,
            current_fraction=current,
            theta_delta=theta_delta_for(current, base_delta, max_delta),
        )

    if track.state is EnergyState.DECREASING:
        state = track.state
        if track.theta_delta == base_delta or track.current_fraction <= 0.0:
            state = EnergyState.REST
        current = clamp_fraction(track.last_fraction - elapsed)
        return replace(
            track,
            state=state,
            current_fraction=current,
            theta_delta=theta_delta_for(current, base_delta, max_delta),
        )

    return track
