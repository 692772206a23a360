from pathlib import Path
from typing import Annotated, Optional

import typer

from letitsnow.cli.commands.options import (AmplitudeOption, BaseLeftOption,
                                            BaseTopOption, PeriodOption,
                                            VerticalLimitOption,
                                            VerticalSpeedOption,
                                            resolve_settings)
from letitsnow.errors import LetItSnowError
from letitsnow.markup.patcher import FragmentPatcher
from letitsnow.runtime.updater import PositionUpdater
from letitsnow.utilities.env import Configuration, MissingFragmentStrategy
from letitsnow.utilities.log_sampling import FailureLogSampler
from letitsnow.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    target: Annotated[
        Optional[Path],
        typer.Option("--target", help="HTML file holding the snowflake element."),
    ] = None,
    base_left: BaseLeftOption = None,
    base_top: BaseTopOption = None,
    amplitude: AmplitudeOption = None,
    period: PeriodOption = None,
    vertical_limit: VerticalLimitOption = None,
    vertical_speed: VerticalSpeedOption = None,
    poll_interval_ms: Annotated[
        Optional[float],
        typer.Option(
            "--poll-interval-ms", min=0.0, help="Sleep between updates in milliseconds."
        ),
    ] = None,
    iterations: Annotated[
        Optional[int],
        typer.Option("--iterations", min=1, help="Stop after this many updates."),
    ] = None,
    missing_fragment: Annotated[
        Optional[MissingFragmentStrategy],
        typer.Option(
            "--missing-fragment",
            case_sensitive=False,
            help="Keep going or stop when the element is missing from the file.",
        ),
    ] = None,
) -> None:
    """Patch the snowflake into the target file until interrupted."""

    try:
        settings = resolve_settings(
            base_left=base_left,
            base_top=base_top,
            amplitude=amplitude,
            period=period,
            vertical_limit=vertical_limit,
            vertical_speed=vertical_speed,
        )
        interval_ms = (
            poll_interval_ms
            if poll_interval_ms is not None
            else Configuration.poll_interval_ms()
        )
        strategy = missing_fragment or Configuration.missing_fragment_strategy()
        target_path = target if target is not None else Configuration.target_file()
        log_interval_s = Configuration.log_sample_interval_s()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1)

    updater = PositionUpdater(
        settings,
        FragmentPatcher(target_path),
        poll_interval_s=interval_ms / 1000.0,
        missing_fragment=strategy,
        failure_log=FailureLogSampler(logger, interval_s=log_interval_s),
    )
    try:
        updater.start(max_iterations=iterations)
    except LetItSnowError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)
