"""Tests for shared utility helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from tokenpaint.services.settings import Settings
from tokenpaint.utils import logging as logging_utils


def test_setup_logging_creates_rotating_file(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"

    log_path = logging_utils.setup_logging(
        Settings(debug_logging=True),
        log_dir=log_dir,
        console=False,
        force=True,
    )

    logging.getLogger("tokenpaint.tests").debug("Logging smoke test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path == log_dir / "tokenpaint.log"
    assert logging_utils.get_log_path() == log_path
    assert "Logging smoke test" in log_path.read_text(encoding="utf-8")


def test_resolve_level_follows_settings_and_flag() -> None:
    assert logging_utils.resolve_level() == logging.WARNING
    assert logging_utils.resolve_level(Settings()) == logging.WARNING
    assert logging_utils.resolve_level(Settings(debug_logging=True)) == logging.DEBUG
    assert logging_utils.resolve_level(Settings(), debug=True) == logging.DEBUG


def test_repeat_setup_keeps_file_but_updates_level(tmp_path: Path) -> None:
    first = logging_utils.setup_logging(Settings(), log_dir=tmp_path / "one", console=False, force=True)
    assert logging.getLogger().level == logging.WARNING

    second = logging_utils.setup_logging(Settings(debug_logging=True), log_dir=tmp_path / "two", console=False)

    assert second == first
    assert logging.getLogger().level == logging.DEBUG
