"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_VARS = (
    "TOKENPAINT_THEME",
    "TOKENPAINT_THEME_PATH",
    "TOKENPAINT_DEBUG_LOGGING",
    "TOKENPAINT_DEFAULT_FOREGROUND",
    "TOKENPAINT_DEFAULT_BACKGROUND",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TOKENPAINT_LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"
