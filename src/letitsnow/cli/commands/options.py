"""Shared trajectory options for commands that compute positions."""

from __future__ import annotations

from dataclasses import replace
from typing import Annotated, Optional

import typer

from letitsnow.errors import ConfigurationError
from letitsnow.motion.trajectory import TrajectorySettings
from letitsnow.utilities.env import Configuration

BaseLeftOption = Annotated[
    Optional[float],
    typer.Option("--base-left", help="Starting horizontal offset in pixels."),
]
BaseTopOption = Annotated[
    Optional[int],
    typer.Option("--base-top", help="Starting vertical offset in pixels."),
]
AmplitudeOption = Annotated[
    Optional[float],
    typer.Option("--amplitude", help="Sine amplitude in pixels."),
]
PeriodOption = Annotated[
    Optional[int],
    typer.Option("--period", help="Sine period in seconds."),
]
VerticalLimitOption = Annotated[
    Optional[int],
    typer.Option("--vertical-limit", help="Top offset at which the fall restarts."),
]
VerticalSpeedOption = Annotated[
    Optional[int],
    typer.Option("--vertical-speed", help="Pixels fallen per second of phase."),
]


def resolve_settings(
    *,
    base_left: float | None,
    base_top: int | None,
    amplitude: float | None,
    period: int | None,
    vertical_limit: int | None,
    vertical_speed: int | None,
) -> TrajectorySettings:
    """Merge CLI overrides onto the environment settings and validate them."""

    try:
        settings = Configuration.trajectory_settings()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    overrides = {
        "base_left": base_left,
        "base_top": base_top,
        "amplitude": amplitude,
        "period": period,
        "vertical_limit": vertical_limit,
        "vertical_speed": vertical_speed,
    }
    settings = replace(
        settings,
        **{key: value for key, value in overrides.items() if value is not None},
    )
    return settings.validate()
