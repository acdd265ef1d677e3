"""Shared test fixtures and configuration.

Keeps tests away from the real config, log and todo files.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from todo_cli.config import ConfigManager
from todo_cli.models import Task

T0 = datetime(2024, 6, 1, 10, 0, 0, tzinfo=UTC)


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    """Remove the rotating file handlers get_logger attached, leaving others."""
    logger = logging.getLogger("todo_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()



@pytest.fixture(autouse=True)
def isolate_logs(tmp_path):
    """Send log output to *tmp_path* and reset the logger singleton."""
    import todo_cli.utils.logger as logger_mod

    _drop_file_handlers()
    logger_mod._logger = None
    with patch("todo_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs"
    _drop_file_handlers()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop environment variables that change where and how todos are shown."""
    for name in ("TODO_FILE", "NO_COLOR", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Storage helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def todo_file(tmp_path):
    """Path of a todo file that does not exist yet."""
    return tmp_path / "todos.json"


@pytest.fixture()
def config_manager(tmp_path):
    """A ConfigManager rooted in a temporary directory."""
    return ConfigManager(config_dir=tmp_path / "config")


def make_task(description: str, done: bool = False, minutes: int = 0) -> Task:
    """Build a task created *minutes* after T0, completed a minute later if done."""
    created = T0 + timedelta(minutes=minutes)
    return Task(
        description=description,
        done=done,
        created_at=created,
        completed_at=created + timedelta(minutes=1) if done else None,
    )


@pytest.fixture()
def task_factory():
    """Expose make_task to tests."""
    return make_task
