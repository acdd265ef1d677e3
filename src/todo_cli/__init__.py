"""todo-cli: a personal task list kept in a local JSON file."""

__version__ = "0.1.0"
