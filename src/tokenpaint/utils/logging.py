"""Logging configuration driven by :class:`~tokenpaint.services.settings.Settings`."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from ..services.settings import Settings

__all__ = ["get_log_path", "resolve_level", "setup_logging"]

_DEFAULT_LOG_DIR = Path.home() / ".tokenpaint" / "logs"
_LOG_FILE_NAME = "tokenpaint.log"
_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
# Theme file parsing can be chatty at DEBUG.
_QUIET_LOGGERS: tuple[str, ...] = ("ruamel", "jsonschema")
_LOG_PATH: Path | None = None


def resolve_level(settings: Settings | None = None, *, debug: bool = False) -> int:
    """DEBUG when requested on the command line or in settings, WARNING otherwise."""

    if debug or (settings is not None and settings.debug_logging):
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    settings: Settings | None = None,
    *,
    debug: bool = False,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 512_000,
    backup_count: int = 2,
    force: bool = False,
) -> Path:
    """Attach a rotating log file (and stderr unless ``console`` is off) to the root logger.

    Later calls only adjust the level unless ``force`` is set, so embedding
    code and the CLI can both call this safely.
    """

    global _LOG_PATH
    level = resolve_level(settings, debug=debug)
    if _LOG_PATH is not None and not force:
        logging.getLogger().setLevel(level)
        return _LOG_PATH

    target_dir = Path(log_dir or os.environ.get("TOKENPAINT_LOG_DIR") or _DEFAULT_LOG_DIR).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / _LOG_FILE_NAME

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = [
        logging.handlers.RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    quiet_level = max(level, logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    _LOG_PATH = log_path
    return log_path


def get_log_path() -> Path | None:
    """Return the log file configured by :func:`setup_logging`, if any."""

    return _LOG_PATH
