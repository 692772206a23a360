"""Rate limiting for warnings raised by a fast polling loop."""

from __future__ import annotations

import logging
import time
from typing import Callable

DEFAULT_SAMPLE_INTERVAL_S = 1.0


class FailureLogSampler:
    """Log a repeating failure at WARNING at most once per interval.

    Repeats inside the interval go to DEBUG and are counted; the next
    WARNING for the same key reports how many were held back. ``clear()``
    forgets all keys once the loop recovers, so a fresh outage is reported
    immediately.
    """

    def __init__(
        self,
        logger: logging.Logger,
        *,
        interval_s: float = DEFAULT_SAMPLE_INTERVAL_S,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger
        self._interval_s = max(interval_s, 0.0)
        self._monotonic = monotonic
        self._next_warning: dict[str, float] = {}
        self._suppressed: dict[str, int] = {}

    def warning(self, key: str, msg: str, *args: object) -> bool:
        now = self._monotonic()
        if now < self._next_warning.get(key, float("-inf")):
            self._suppressed[key] = self._suppressed.get(key, 0) + 1
            self._logger.debug(msg, *args)
            return False

        self._next_warning[key] = now + self._interval_s
        suppressed = self._suppressed.pop(key, 0)
        if suppressed:
            self._logger.warning(
                f"{msg} (%d repeats suppressed)", *args, suppressed
            )
        else:
            self._logger.warning(msg, *args)
        return True

    def clear(self) -> None:
        if self._next_warning:
            self._logger.info("Snowflake updates recovered")
        self._next_warning.clear()
        self._suppressed.clear()
