"""todo-cli domain models.

``Task`` is one entry; ``TodoList`` is the ordered, file-backed collection
the commands operate on.
"""

from .task import ZERO_TIME, Task
from .todo_list import TodoList

__all__ = [
    "Task",
    "TodoList",
    "ZERO_TIME",
]
