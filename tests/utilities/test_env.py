"""Tests for :mod:`letitsnow.utilities.env`."""

from __future__ import annotations

from pathlib import Path

import pytest

from letitsnow.motion.trajectory import TrajectorySettings
from letitsnow.utilities.env import Configuration, MissingFragmentStrategy

ENV_VARS = (
    "LETITSNOW_TARGET_FILE",
    "LETITSNOW_BASE_LEFT",
    "LETITSNOW_BASE_TOP",
    "LETITSNOW_AMPLITUDE",
    "LETITSNOW_PERIOD",
    "LETITSNOW_VERTICAL_LIMIT",
    "LETITSNOW_VERTICAL_SPEED",
    "LETITSNOW_POLL_INTERVAL_MS",
    "LETITSNOW_MISSING_FRAGMENT",
    "LETITSNOW_LOG_INTERVAL_S",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfiguration:
    """Group environment configuration tests so deployments can tune the animation without code edits."""

    def test_defaults_match_original_animation(self) -> None:
        assert Configuration.trajectory_settings() == TrajectorySettings(
            base_left=0.0,
            base_top=0,
            amplitude=100.0,
            period=10,
            vertical_limit=300,
            vertical_speed=5,
        )
        assert Configuration.target_file() == Path("test.html")
        assert Configuration.poll_interval_ms() == 10.0
        assert Configuration.missing_fragment_strategy() is MissingFragmentStrategy.WARN
        assert Configuration.log_sample_interval_s() == 1.0

    def test_environment_overrides_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LETITSNOW_BASE_LEFT", "-20.5")
        monkeypatch.setenv("LETITSNOW_PERIOD", "30")
        monkeypatch.setenv("LETITSNOW_VERTICAL_SPEED", "2")

        settings = Configuration.trajectory_settings()

        assert settings.base_left == -20.5
        assert settings.period == 30
        assert settings.vertical_speed == 2

    def test_zero_period_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Ensure a zero period is refused instead of dividing by zero later."""
        monkeypatch.setenv("LETITSNOW_PERIOD", "0")

        with pytest.raises(ValueError, match="LETITSNOW_PERIOD"):
            Configuration.period()

    def test_non_numeric_amplitude_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LETITSNOW_AMPLITUDE", "wide")

        with pytest.raises(ValueError, match="must be a float"):
            Configuration.amplitude()

    def test_blank_target_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LETITSNOW_TARGET_FILE", "  ")

        assert Configuration.target_file() == Path("test.html")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("warn", MissingFragmentStrategy.WARN), ("FATAL", MissingFragmentStrategy.FATAL)],
    )
    def test_missing_fragment_strategy_parses(
        self,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
        expected: MissingFragmentStrategy,
    ) -> None:
        monkeypatch.setenv("LETITSNOW_MISSING_FRAGMENT", value)

        assert Configuration.missing_fragment_strategy() is expected

    def test_unknown_missing_fragment_strategy_is_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LETITSNOW_MISSING_FRAGMENT", "ignore")

        with pytest.raises(ValueError):
            Configuration.missing_fragment_strategy()

    def test_negative_log_interval_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LETITSNOW_LOG_INTERVAL_S", "-1")

        with pytest.raises(ValueError, match="LETITSNOW_LOG_INTERVAL_S"):
            Configuration.log_sample_interval_s()
