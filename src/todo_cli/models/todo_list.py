"""Ordered, file-backed list of tasks.

Positions are 1-based and are the only way callers address a task, so they
shift down after a delete. The list is loaded from and stored to a JSON array
whose elements use the ``Task``/``Done``/``CreatedAt``/``CompletedAt`` keys.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from todo_cli.errors import (
    IndexOutOfRangeError,
    InvalidInputError,
    ParseError,
    StorageError,
)
from todo_cli.models.task import Task, utcnow

logger = logging.getLogger(__name__)

_TASKS_ADAPTER = TypeAdapter(list[Task])


class TodoList:
    """In-memory task list with load/store round-tripping through a JSON file."""

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TodoList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TodoList({self._tasks!r})"

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in display order."""
        return tuple(self._tasks)

    def get(self, position: int) -> Task:
        """Return the task at a 1-based *position*."""
        return self._tasks[self._index(position)]

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self._tasks):
            raise IndexOutOfRangeError(position, len(self._tasks))
        return position - 1

    # -------------------- mutations --------------------

    def add(self, description: str) -> Task:
        """Append a new pending task and return it."""
        if not (description or "").strip():
            raise InvalidInputError("empty todo not allowed")

        task = Task(description=description, created_at=utcnow())
        self._tasks.append(task)
        logger.debug("added task #%d", len(self._tasks))
        return task

    def toggle(self, position: int) -> Task:
        """Flip the done flag at *position* and stamp ``completed_at``.

        The stamp is updated in both directions, so it records the last
        toggle rather than strictly the completion.
        """
        index = self._index(position)
        task = self._tasks[index].toggled(utcnow())
        self._tasks[index] = task
        logger.debug("toggled task #%d -> done=%s", position, task.done)
        return task

    def delete(self, position: int) -> Task:
        """Remove and return the task at *position*; later tasks move up by one."""
        index = self._index(position)
        removed = self._tasks[index]
        self._tasks = self._tasks[:index] + self._tasks[index + 1 :]
        logger.debug("deleted task #%d", position)
        return removed

    def count_pending(self) -> int:
        """Number of tasks not yet done."""
        return sum(1 for task in self._tasks if not task.done)

    # -------------------- persistence --------------------

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the contents with the tasks stored at *path*.

        A missing file yields an empty list. A file that is empty (or only
        whitespace) leaves the current contents untouched.
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("no todo file at %s, starting empty", path)
            self._tasks = []
            return
        except UnicodeDecodeError as e:
            raise ParseError(f"{path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise StorageError(f"cannot read {path}: {e}") from e

        if not raw.strip():
            logger.debug("todo file %s is empty, keeping current tasks", path)
            return

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"{path} is not valid JSON: {e}") from e
        except RecursionError as e:
            raise ParseError(f"{path} is nested too deeply to read") from e
        if not isinstance(data, list):
            raise ParseError(f"{path} must hold a JSON array of tasks")

        try:
            tasks = _TASKS_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise ParseError(
                f"{path} holds an invalid task: {e.errors()[0]['msg']}"
            ) from e

        self._tasks = tasks
        logger.debug("loaded %d task(s) from %s", len(tasks), path)

    def store(self, path: str | os.PathLike[str]) -> None:
        """Write every task to *path* as a JSON array, replacing the file.

        The data goes to a temporary file beside *path* first and is then
        renamed over it, so an interrupted write never truncates the list.
        """
        path = Path(path)
        payload = json.dumps(
            [task.to_record() for task in self._tasks],
            indent=2,
            ensure_ascii=False,
        )

        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(payload + "\n")
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"cannot write {path}: {e}") from e

        logger.debug("stored %d task(s) to %s", len(self._tasks), path)
