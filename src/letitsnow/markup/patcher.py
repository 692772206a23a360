"""Line-oriented replacement of the snowflake fragment inside a document."""

from __future__ import annotations

import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path

from letitsnow.errors import FragmentNotFoundError, TargetFileError
from letitsnow.utilities.logging import get_logger

logger = get_logger(__name__)

FRAGMENT_PATTERN = re.compile(r'<img id="snowflake".*</img>')


@dataclass(frozen=True)
class PatchResult:
    matches: int
    written: bool


def patch_text(text: str, fragment: str) -> tuple[str, int]:
    """Replace the matched span on every line carrying the fragment.

    Only the span matched by :data:`FRAGMENT_PATTERN` changes; indentation,
    trailing text and line endings are kept as they were.
    """

    lines = text.splitlines(keepends=True)
    matches = 0
    for index, line in enumerate(lines):
        # A callable replacement keeps backslashes in the fragment literal.
        patched, count = FRAGMENT_PATTERN.subn(lambda _match: fragment, line, count=1)
        if count:
            lines[index] = patched
            matches += 1
    return "".join(lines), matches


class FragmentPatcher:
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def ensure_target(self) -> None:
        if not self.path.exists():
            raise TargetFileError(f"Target file {self.path} does not exist")
        if not self.path.is_file():
            raise TargetFileError(f"Target path {self.path} is not a regular file")

    def apply(self, fragment: str) -> PatchResult:
        original = self._read()
        patched, matches = patch_text(original, fragment)
        if matches == 0:
            raise FragmentNotFoundError(
                f"No snowflake fragment found in {self.path}"
            )
        if matches > 1:
            logger.warning(
                "Replaced %d snowflake fragments in %s; expected exactly one",
                matches,
                self.path,
            )
        if patched == original:
            return PatchResult(matches=matches, written=False)
        self._write(patched)
        return PatchResult(matches=matches, written=True)

    def _read(self) -> str:
        # Undecodable bytes round-trip unchanged through surrogateescape.
        with self.path.open(
            "r", encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            return handle.read()

    def _write(self, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(
                fd, "w", encoding="utf-8", errors="surrogateescape", newline=""
            ) as handle:
                handle.write(text)
            if self.path.exists():
                os.chmod(tmp_path, self.path.stat().st_mode & 0o777)
            os.replace(tmp_path, self.path)
        finally:
            tmp_path.unlink(missing_ok=True)
