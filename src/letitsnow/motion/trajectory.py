"""Sine/sawtooth trajectory of the falling snowflake.

The horizontal offset swings along a sine wave of the clock phase while the
vertical offset falls linearly and wraps back to the top once it reaches the
configured limit. The only value carried between iterations is the vertical
base, held in :class:`TrajectoryState`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from letitsnow.errors import ConfigurationError

DEFAULT_BASE_LEFT = 0.0
DEFAULT_BASE_TOP = 0
DEFAULT_AMPLITUDE = 100.0
DEFAULT_PERIOD = 10
DEFAULT_VERTICAL_LIMIT = 300
DEFAULT_VERTICAL_SPEED = 5


@dataclass(frozen=True)
class TrajectorySettings:
    base_left: float = DEFAULT_BASE_LEFT
    base_top: int = DEFAULT_BASE_TOP
    amplitude: float = DEFAULT_AMPLITUDE
    period: int = DEFAULT_PERIOD
    vertical_limit: int = DEFAULT_VERTICAL_LIMIT
    vertical_speed: int = DEFAULT_VERTICAL_SPEED

    def validate(self) -> TrajectorySettings:
        if self.period <= 0:
            raise ConfigurationError("period must be a positive number of seconds")
        if self.vertical_limit <= 0:
            raise ConfigurationError("vertical_limit must be positive")
        if self.vertical_speed < 0:
            raise ConfigurationError("vertical_speed must not be negative")
        if self.amplitude < 0:
            raise ConfigurationError("amplitude must not be negative")
        if self.base_top < 0:
            raise ConfigurationError("base_top must not be negative")
        return self


@dataclass(frozen=True)
class TrajectoryState:
    base_top: int


@dataclass(frozen=True)
class Position:
    left: float
    top: int


def initial_state(settings: TrajectorySettings) -> TrajectoryState:
    return TrajectoryState(base_top=settings.base_top)


def phase(current_time: int, period: int) -> int:
    """Return the position of ``current_time`` within one cycle."""

    return current_time % period


def radians(cycle_phase: int, period: int) -> float:
    return cycle_phase / period * 2 * math.pi


def horizontal_offset(settings: TrajectorySettings, cycle_phase: int) -> float:
    return settings.base_left + settings.amplitude * math.sin(
        radians(cycle_phase, settings.period)
    )


def advance(
    settings: TrajectorySettings,
    state: TrajectoryState,
    current_time: int,
) -> tuple[Position, TrajectoryState]:
    """Compute the position for ``current_time`` and the state for the next call.

    The vertical candidate is the carried base plus the distance fallen during
    the current phase. Reaching ``vertical_limit`` restarts the fall: the
    emitted top is ``0`` and the next base is ``0``.
    """

    cycle_phase = phase(current_time, settings.period)
    left = horizontal_offset(settings, cycle_phase)
    candidate = state.base_top + cycle_phase * settings.vertical_speed
    if candidate >= settings.vertical_limit:
        return Position(left=left, top=0), TrajectoryState(base_top=0)
    return Position(left=left, top=candidate), TrajectoryState(base_top=candidate)
