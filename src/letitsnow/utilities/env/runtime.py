from pathlib import Path

from letitsnow.utilities.env.enums import MissingFragmentStrategy
from letitsnow.utilities.env.parsing import _env_float, _env_str

DEFAULT_TARGET_FILE = "test.html"
DEFAULT_POLL_INTERVAL_MS = 10.0
DEFAULT_MISSING_FRAGMENT_STRATEGY = MissingFragmentStrategy.WARN
DEFAULT_LOG_SAMPLE_INTERVAL_S = 1.0


class RuntimeConfiguration:
    @classmethod
    def target_file(cls) -> Path:
        return Path(
            _env_str("LETITSNOW_TARGET_FILE", default=DEFAULT_TARGET_FILE)
        ).expanduser()

    @classmethod
    def poll_interval_ms(cls) -> float:
        return _env_float(
            "LETITSNOW_POLL_INTERVAL_MS",
            default=DEFAULT_POLL_INTERVAL_MS,
            minimum=0.0,
        )

    @classmethod
    def missing_fragment_strategy(cls) -> MissingFragmentStrategy:
        strategy = _env_str(
            "LETITSNOW_MISSING_FRAGMENT",
            default=DEFAULT_MISSING_FRAGMENT_STRATEGY.value,
        ).lower()
        try:
            return MissingFragmentStrategy(strategy)
        except ValueError as exc:
            raise ValueError(
                "LETITSNOW_MISSING_FRAGMENT must be 'warn' or 'fatal'"
            ) from exc

    @classmethod
    def log_sample_interval_s(cls) -> float:
        return _env_float(
            "LETITSNOW_LOG_INTERVAL_S",
            default=DEFAULT_LOG_SAMPLE_INTERVAL_S,
            minimum=0.0,
        )
