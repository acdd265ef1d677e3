"""Application-wide logger writing to platformdirs user_log_dir.

The level defaults to DEBUG and can be lowered with ``TODO_LOG_LEVEL``.
Modules ask for a child logger with ``get_logger(__name__)`` so records show
where they came from.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "todo_cli"
_LOG_FILE = "todo.log"
_LEVEL_ENV = "TODO_LOG_LEVEL"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _resolve_level() -> int:
    name = os.environ.get(_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def _init_root() -> logging.Logger:
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_resolve_level())
    logger.propagate = False
    # Handlers added by others (log capture, host apps) do not count
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        return logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children.

    The file handler is attached to the ``todo_cli`` logger on first call;
    child loggers share it through propagation.
    """
    global _logger
    if _logger is None:
        _logger = _init_root()

    if not name or name == _APP_NAME:
        return _logger
    if name.startswith(_APP_NAME + "."):
        return logging.getLogger(name)
    return _logger.getChild(name)
