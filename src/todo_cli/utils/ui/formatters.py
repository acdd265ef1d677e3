"""Output formatters for the task list.

``format_task_rows`` is pure and returns plain strings; the table builder
adds Rich styling on top of it. Nothing here inspects the terminal.
"""

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todo_cli.config import RFC822
from todo_cli.models import Task, TodoList
from todo_cli.models.task import is_zero_time
from todo_cli.utils.ui.console import get_console

CHECK_MARK = "✅"
UNSET = "-"

PENDING_STYLE = "blue"
DONE_STYLE = "green"
FOOTER_STYLE = "red"

COLUMNS = ("#", "Task", "Done?", "CreatedAt", "CompletedAt")


def format_display_time(value: datetime | None, date_format: str = RFC822) -> str:
    """Render a timestamp in local time, or ``-`` when unset."""
    if value is None or is_zero_time(value):
        return UNSET
    try:
        local = value.astimezone()
    except OverflowError:
        # Shifting dates at the edge of the calendar can leave datetime range
        local = value
    return local.strftime(date_format)


def format_task_rows(
    tasks: Iterable[Task], date_format: str = RFC822
) -> list[tuple[str, str, str, str, str]]:
    """
    Turn tasks into display rows.

    Args:
        tasks: Tasks in display order
        date_format: strftime pattern for both timestamp columns

    Returns:
        One ``(index, task, done, created, completed)`` tuple per task
    """
    rows = []
    for position, task in enumerate(tasks, start=1):
        text = f"{CHECK_MARK} {task.description}" if task.done else task.description
        rows.append(
            (
                str(position),
                text,
                "yes" if task.done else "no",
                format_display_time(task.created_at, date_format),
                format_display_time(task.completed_at, date_format),
            )
        )
    return rows


def format_pending_footer(pending: int) -> str:
    """Footer line shown under the table."""
    return f"You have {pending} pending todos"


def build_task_table(
    todos: TodoList, color: bool = True, date_format: str = RFC822
) -> Table:
    """Build a Rich table of *todos* with a pending-count footer."""
    table = Table(box=box.ROUNDED, show_header=True, show_footer=True)
    header_style = "bold" if color else None

    table.add_column(COLUMNS[0], justify="center", header_style=header_style)
    table.add_column(
        COLUMNS[1],
        justify="left",
        header_style=header_style,
        footer=Text(
            format_pending_footer(todos.count_pending()),
            style=FOOTER_STYLE if color else "",
        ),
    )
    table.add_column(COLUMNS[2], justify="center", header_style=header_style)
    table.add_column(COLUMNS[3], justify="right", header_style=header_style)
    table.add_column(COLUMNS[4], justify="right", header_style=header_style)

    for task, row in zip(todos, format_task_rows(todos, date_format)):
        style = None
        if color:
            style = DONE_STYLE if task.done else PENDING_STYLE
        index, text, done, created, completed = row
        table.add_row(
            index,
            Text(text, style=style or ""),
            Text(done, style=style or ""),
            created,
            completed,
        )

    return table


def format_output(
    todos: TodoList,
    output_format: str = "table",
    color: bool = True,
    date_format: str = RFC822,
    console: Console | None = None,
) -> None:
    """Print *todos* as a table, or as JSON/YAML using the stored field names."""
    console = console or get_console(no_color=not color)
    if output_format == "json":
        console.out(json.dumps(_records(todos), indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        console.out(
            yaml.safe_dump(
                _records(todos),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            ).rstrip()
        )
    else:
        console.print(build_task_table(todos, color=color, date_format=date_format))


def _records(todos: TodoList) -> list[dict[str, Any]]:
    return [task.to_record() for task in todos]


def format_error(message: str) -> None:
    """Print an error message to standard error."""
    get_console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Print a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")
