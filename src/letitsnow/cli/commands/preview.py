import time
from typing import Annotated, Optional

import typer

from letitsnow.cli.commands.options import (AmplitudeOption, BaseLeftOption,
                                            BaseTopOption, PeriodOption,
                                            VerticalLimitOption,
                                            VerticalSpeedOption,
                                            resolve_settings)
from letitsnow.errors import ConfigurationError
from letitsnow.markup.fragment import format_pixels
from letitsnow.motion.trajectory import advance, initial_state


def preview_command(
    start: Annotated[
        Optional[int],
        typer.Option("--start", help="First clock reading in epoch seconds (default: now)."),
    ] = None,
    count: Annotated[
        int, typer.Option("--count", min=1, help="Number of consecutive seconds to show.")
    ] = 10,
    base_left: BaseLeftOption = None,
    base_top: BaseTopOption = None,
    amplitude: AmplitudeOption = None,
    period: PeriodOption = None,
    vertical_limit: VerticalLimitOption = None,
    vertical_speed: VerticalSpeedOption = None,
) -> None:
    """Print one position per second, carrying the fall between readings."""

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

    first = int(time.time()) if start is None else start
    state = initial_state(settings)
    for current_time in range(first, first + count):
        position, state = advance(settings, state, current_time)
        typer.echo(
            f"{current_time}\ttop={format_pixels(position.top)}px"
            f"\tleft={format_pixels(position.left)}px"
        )
