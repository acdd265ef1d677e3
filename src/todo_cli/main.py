"""Main entry point for todo-cli."""

from todo_cli.commands.todo_command import app


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
