"""Helpers that turn raw command-line input into task list arguments."""

from typing import TextIO

from todo_cli.errors import InvalidInputError


def read_task_text(args: list[str] | None, stream: TextIO) -> str:
    """
    Get the text of a new task.

    Trailing positional arguments win and are joined with single spaces.
    Without any, a single line is read from *stream*.

    Args:
        args: Positional words given after ``--add``
        stream: Where to read a line from when *args* is empty

    Returns:
        The task text

    Raises:
        InvalidInputError: If the resulting text is empty
    """
    if args:
        text = " ".join(args)
    else:
        text = stream.readline().rstrip("\r\n")

    if not text.strip():
        raise InvalidInputError("empty todo not allowed")
    return text


def check_position(position: int, option: str) -> int:
    """Reject negative positions given to ``--toggle``/``--delete``."""
    if position < 0:
        raise InvalidInputError(
            f"{option} expects a positive position, got {position}"
        )
    return position
