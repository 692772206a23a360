from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
  <body class="relative">
    <div class="h-screen">
      {fragment}
    </div>
  </body>
</html>
"""
STALE_FRAGMENT = (
    '<img id="snowflake" class="top-[0px] left-[0px] absolute w-full h-full" '
    'src="https://example.com/old.png"></img>'
)


@pytest.fixture()
def document(tmp_path: Path) -> Path:
    path = tmp_path / "test.html"
    path.write_text(DOCUMENT_TEMPLATE.format(fragment=STALE_FRAGMENT), encoding="utf-8")
    return path
