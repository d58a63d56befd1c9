"""Project-wide logging setup for the gallery effects engine.

Logs go to a rotating UTF-8 file so localised effect labels survive, and the
console handler stays off by default so the Textual preview is not garbled.
Calling setup_logging() again updates the existing handlers instead of
stacking new ones.

Usage:
    from logging_config import setup_logging
    setup_logging()

Environment overrides (read through gallery.config):
    GALLERY_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    GALLERY_LOG_FILE=path/to/file.log
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gallery.config import get_config

_FILE_HANDLER_NAME = "gallery_file"
_CONSOLE_HANDLER_NAME = "gallery_console"
_DEFAULT_LOG_PATH = Path("logs") / "gallery.log"

# Third-party loggers that are noisy at DEBUG
_QUIET_LOGGERS = ("asyncio", "markdown_it", "textual")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName((level or "").strip().upper() or "INFO")
    return resolved if isinstance(resolved, int) else logging.INFO


def _resolve_log_path(log_file: str | None) -> Path:
    path = Path(log_file) if log_file else _DEFAULT_LOG_PATH
    if not path.is_absolute():
        path = Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    *,
    level: str | int | None = None,
    log_file: str | None = None,
    enable_file: bool = True,
    enable_console: bool = False,
    console_level: str | int = "WARNING",
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the root logger and return it.

    ``level`` defaults to ``EngineConfig.log_level``; ``GALLERY_LOG_FILE``
    wins over ``log_file``.
    """
    if level is None:
        level = get_config().log_level
    log_file = os.environ.get("GALLERY_LOG_FILE") or log_file

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers filter

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = {getattr(h, "name", ""): h for h in root.handlers}

    log_path = None
    if enable_file:
        log_path = _resolve_log_path(log_file)
        file_handler = handlers.get(_FILE_HANDLER_NAME)
        if file_handler is None:
            file_handler = RotatingFileHandler(
                str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.name = _FILE_HANDLER_NAME
            root.addHandler(file_handler)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(_parse_level(level))

    if enable_console:
        console_handler = handlers.get(_CONSOLE_HANDLER_NAME)
        if console_handler is None:
            console_handler = logging.StreamHandler()
            console_handler.name = _CONSOLE_HANDLER_NAME
            root.addHandler(console_handler)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(_parse_level(console_level))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s console=%s",
        level,
        log_path,
        enable_console,
    )
    return root
