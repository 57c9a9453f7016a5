from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lawmaker.toolchain import ToolVersion  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_toolchain(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent from any Elixir installation on the host."""

    monkeypatch.setattr("lawmaker.namespace.shutil.which", lambda name: None)
    monkeypatch.setenv("LAWMAKER_ELIXIR_VERSION", "1.6.0")


@pytest.fixture()
def version() -> ToolVersion:
    return ToolVersion(major=1, minor=6)
