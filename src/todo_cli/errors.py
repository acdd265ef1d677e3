"""Error types raised by the todo list and its command layer."""

from todo_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_PARSE,
    ERROR_STORAGE,
)


class TodoError(Exception):
    """Base application error carrying the exit code the CLI should use."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidInputError(TodoError):
    """Task text is empty or a command argument is malformed."""

    exit_code = ERROR_INVALID_ARGS


class IndexOutOfRangeError(TodoError):
    """A 1-based position falls outside the list."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, position: int, length: int):
        super().__init__(f"invalid index {position}: list has {length} item(s)")
        self.position = position
        self.length = length


class StorageError(TodoError):
    """The todo file could not be read or written."""

    exit_code = ERROR_STORAGE


class ParseError(TodoError):
    """The todo file exists but does not hold a valid task list."""

    exit_code = ERROR_PARSE
