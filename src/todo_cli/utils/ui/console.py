"""Console utilities for todo-cli."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(stderr: bool = False, no_color: bool = False) -> Console:
    """Get a Rich Console for standard output, or standard error when asked."""
    return Console(stderr=stderr, no_color=no_color, highlight=False)
