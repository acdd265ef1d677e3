"""The ``todo`` command: add, toggle, delete or list tasks."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import BaseModel, ValidationError

from todo_cli import __version__
from todo_cli.config import ConfigManager, get_config_manager
from todo_cli.errors import InvalidInputError
from todo_cli.models import TodoList
from todo_cli.utils.task_helpers import check_position, read_task_text
from todo_cli.utils.ui.console import get_console
from todo_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

OUTPUT_FORMATS = ("table", "json", "yaml")

app = typer.Typer(
    name="todo",
    help="Keep a personal to-do list in a local JSON file.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"todo-cli version {__version__}")
        raise typer.Exit()


def add_task(todos: TodoList, path: Path, text: str) -> None:
    todos.add(text)
    todos.store(path)


def toggle_task(todos: TodoList, path: Path, position: int) -> None:
    todos.toggle(position)
    todos.store(path)


def delete_task(todos: TodoList, path: Path, position: int) -> None:
    todos.delete(position)
    todos.store(path)


def list_tasks(todos: TodoList, manager: ConfigManager, output: str) -> None:
    if output not in OUTPUT_FORMATS:
        raise InvalidInputError(
            f"unknown output format '{output}' (choose from {', '.join(OUTPUT_FORMATS)})"
        )
    format_output(
        todos,
        output_format=output,
        color=manager.use_color(),
        date_format=manager.config.output.date_format,
    )


def show_or_set_config(manager: ConfigManager, setting: str) -> None:
    """Print ``key`` or store ``key=value`` in the config file."""
    key, sep, value = setting.partition("=")
    key = key.strip()
    current = manager.get(key)
    if current is None or isinstance(current, BaseModel):
        raise InvalidInputError(f"unknown config key '{key}'")
    if sep:
        try:
            manager.set(key, value.strip())
        except ValidationError as e:
            raise InvalidInputError(
                f"invalid value for {key}: {e.errors()[0]['msg']}"
            ) from e
        format_success(f"{key} = {manager.get(key)}")
    else:
        get_console().print(f"{key} = {manager.get(key)}")


@app.command()
@command_wrapper
def todo(
    words: Annotated[
        Optional[list[str]],
        typer.Argument(help="Task text for --add (read from stdin if omitted)"),
    ] = None,
    add: Annotated[
        bool, typer.Option("--add", "-a", help="Add a new todo item")
    ] = False,
    toggle: Annotated[
        int, typer.Option("--toggle", "-t", help="Toggle the todo at this position")
    ] = 0,
    delete: Annotated[
        int, typer.Option("--delete", "-d", help="Delete the todo at this position")
    ] = 0,
    list_opt: Annotated[
        bool, typer.Option("--list", "-l", help="List all todo items")
    ] = False,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="List format: table, json or yaml"),
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
    file: Annotated[
        Optional[str],
        typer.Option("--file", "-f", help="Todo file to use instead of the configured one"),
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", help="Show KEY or set KEY=VALUE in the config file"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Add, toggle, delete or list todo items.

    Examples:
      todo --add Buy milk
      echo "Call mom" | todo --add
      todo --toggle 1
      todo --delete 2
      todo --list
    """
    manager = get_config_manager()
    check_position(toggle, "--toggle")
    check_position(delete, "--delete")

    if config is not None:
        show_or_set_config(manager, config)
        return

    path = manager.resolve_storage_path(file)
    todos = TodoList()
    todos.load(path)

    if add:
        add_task(todos, path, read_task_text(words, sys.stdin))
    elif toggle > 0:
        toggle_task(todos, path, toggle)
    elif delete > 0:
        delete_task(todos, path, delete)
    elif list_opt:
        if json_opt:
            output = "json"
        list_tasks(todos, manager, output or manager.config.output.format)
    else:
        # Reported on stdout with exit status 0, unlike the errors above
        typer.echo("invalid command")
