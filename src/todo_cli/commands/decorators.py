"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from todo_cli.errors import TodoError
from todo_cli.utils.exit_codes import ERROR_GENERAL
from todo_cli.utils.logger import get_logger
from todo_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable) -> Callable:
    """Log a command's run and turn its errors into messages and exit codes.

    ``TodoError`` subclasses print their message to standard error and exit
    with their own code. ``typer.Exit`` passes through untouched. Anything
    else is logged with its traceback and reported as a generic failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(__name__)
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
        except TodoError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s: %s",
                cmd,
                elapsed,
                type(e).__name__,
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e
        except typer.Exit:
            raise
        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

        elapsed = time.monotonic() - start
        logger.info("command completed: %s (%.3fs)", cmd, elapsed)
        return result

    return wrapper
