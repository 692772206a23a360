import time
from typing import Annotated, Optional

import typer

from letitsnow.cli.commands.options import (AmplitudeOption, BaseLeftOption,
                                            BaseTopOption, PeriodOption,
                                            VerticalLimitOption,
                                            VerticalSpeedOption,
                                            resolve_settings)
from letitsnow.errors import ConfigurationError
from letitsnow.markup.fragment import build_fragment
from letitsnow.motion.trajectory import advance, initial_state


def render_command(
    at_time: Annotated[
        Optional[int],
        typer.Option("--time", help="Clock reading in epoch seconds (default: now)."),
    ] = None,
    base_left: BaseLeftOption = None,
    base_top: BaseTopOption = None,
    amplitude: AmplitudeOption = None,
    period: PeriodOption = None,
    vertical_limit: VerticalLimitOption = None,
    vertical_speed: VerticalSpeedOption = None,
) -> None:
    """Print the fragment for one clock reading without touching any file."""

    try:
        settings = resolve_settings(
            base_left=base_left,
            base_top=base_top,
            amplitude=amplitude,
            period=period,
            vertical_limit=vertical_limit,
            vertical_speed=vertical_speed,
        )
    except ConfigurationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1)

    current_time = int(time.time()) if at_time is None else at_time
    position, _ = advance(settings, initial_state(settings), current_time)
    typer.echo(build_fragment(position))
