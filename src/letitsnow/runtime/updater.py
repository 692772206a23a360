from __future__ import annotations

import time
from typing import Callable

from letitsnow.errors import FragmentNotFoundError
from letitsnow.markup.fragment import build_fragment
from letitsnow.markup.patcher import FragmentPatcher
from letitsnow.motion.trajectory import (Position, TrajectorySettings,
                                         TrajectoryState, advance,
                                         initial_state)
from letitsnow.utilities.env.enums import MissingFragmentStrategy
from letitsnow.utilities.log_sampling import FailureLogSampler
from letitsnow.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL_S = 0.01


class PositionUpdater:
    """Rewrite the snowflake fragment in a document once per poll interval.

    Iterations run strictly one after another. Invalid settings are rejected
    on construction and a missing target file before the first iteration;
    failures inside an iteration are logged and the loop moves on.
    """

    def __init__(
        self,
        settings: TrajectorySettings,
        patcher: FragmentPatcher,
        *,
        poll_interval_s: float = DEFAULT_POLL_INTERVAL_S,
        missing_fragment: MissingFragmentStrategy = MissingFragmentStrategy.WARN,
        failure_log: FailureLogSampler | None = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings.validate()
        self.patcher = patcher
        self.poll_interval_s = max(poll_interval_s, 0.0)
        self.missing_fragment = missing_fragment
        self._failure_log = failure_log or FailureLogSampler(logger)
        self._clock = clock
        self._sleep = sleep
        self._state = initial_state(settings)
        self.iterations = 0

    @property
    def state(self) -> TrajectoryState:
        return self._state

    def step(self) -> Position:
        current_time = int(self._clock())
        position, self._state = advance(self.settings, self._state, current_time)
        try:
            self.patcher.apply(build_fragment(position))
        except FragmentNotFoundError as exc:
            if self.missing_fragment == MissingFragmentStrategy.FATAL:
                raise
            self._failure_log.warning(
                "missing_fragment", "%s; skipping update", exc
            )
        except OSError as exc:
            self._failure_log.warning(
                "io_error", "Failed to update %s: %s", self.patcher.path, exc
            )
        else:
            self._failure_log.clear()
        self.iterations += 1
        return position

    def start(self, max_iterations: int | None = None) -> None:
        self.patcher.ensure_target()
        logger.info(
            "Animating snowflake in %s every %.3fs (period=%ss, amplitude=%spx)",
            self.patcher.path,
            self.poll_interval_s,
            self.settings.period,
            self.settings.amplitude,
        )
        try:
            while max_iterations is None or self.iterations < max_iterations:
                self.step()
                self._sleep(self.poll_interval_s)
        except KeyboardInterrupt:
            logger.info("Interrupted; stopping after %d iterations", self.iterations)
