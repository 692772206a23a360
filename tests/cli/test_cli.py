"""Tests for the ``letitsnow`` command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from letitsnow.loop import app

runner = CliRunner()

IMAGE_URL = "https://www.pngall.com/wp-content/uploads/13/Snowflake-PNG-Image-File.png"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LETITSNOW_TARGET_FILE",
        "LETITSNOW_PERIOD",
        "LETITSNOW_POLL_INTERVAL_MS",
        "LETITSNOW_MISSING_FRAGMENT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestRenderCommand:
    def test_render_prints_fragment_for_cycle_start(self) -> None:
        result = runner.invoke(app, ["render", "--time", "1700000000"])

        assert result.exit_code == 0
        assert result.output == (
            '<img id="snowflake" class="top-[0px] left-[0px] absolute w-full h-full" '
            f'src="{IMAGE_URL}"></img>\n'
        )

    def test_render_rejects_zero_period(self) -> None:
        result = runner.invoke(app, ["render", "--time", "0", "--period", "0"])

        assert result.exit_code == 1


class TestPreviewCommand:
    def test_preview_carries_fall_between_seconds(self) -> None:
        result = runner.invoke(app, ["preview", "--start", "0", "--count", "4"])

        assert result.exit_code == 0
        tops = [line.split("\t")[1] for line in result.output.splitlines()]
        assert tops == ["top=0px", "top=5px", "top=15px", "top=30px"]


class TestRunCommand:
    """Exercise the run command end to end against a temporary document."""

    def test_run_help_describes_command(self) -> None:
        result = runner.invoke(app, ["run", "--help"])

        assert result.exit_code == 0
        assert "Patch the snowflake into the target file" in result.output

    def test_run_patches_target_for_requested_iterations(self, document: Path) -> None:
        result = runner.invoke(
            app,
            [
                "run",
                "--target",
                str(document),
                "--iterations",
                "2",
                "--poll-interval-ms",
                "0",
            ],
        )

        assert result.exit_code == 0
        text = document.read_text(encoding="utf-8")
        assert IMAGE_URL in text
        assert "https://example.com/old.png" not in text

    def test_run_reads_target_from_environment(
        self, document: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LETITSNOW_TARGET_FILE", str(document))

        result = runner.invoke(app, ["run", "--iterations", "1", "--poll-interval-ms", "0"])

        assert result.exit_code == 0
        assert IMAGE_URL in document.read_text(encoding="utf-8")

    def test_run_missing_target_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["run", "--target", str(tmp_path / "absent.html"), "--iterations", "1"]
        )

        assert result.exit_code == 1

    def test_run_fatal_missing_fragment_exits_with_error(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.html"
        path.write_text("<html></html>\n", encoding="utf-8")

        result = runner.invoke(
            app,
            [
                "run",
                "--target",
                str(path),
                "--iterations",
                "1",
                "--poll-interval-ms",
                "0",
                "--missing-fragment",
                "fatal",
            ],
        )

        assert result.exit_code == 1

    def test_run_invalid_environment_exits_with_error(
        self, document: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LETITSNOW_POLL_INTERVAL_MS", "soon")

        result = runner.invoke(app, ["run", "--target", str(document), "--iterations", "1"])

        assert result.exit_code == 1
