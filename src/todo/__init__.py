"""In-memory todo list shared by the web server."""

from .exceptions import InvalidTodoIdError, TodoError
from .models import TodoItem, parse_todo_id
from .todo_list import TodoList

__all__ = ["InvalidTodoIdError", "TodoError", "TodoItem", "TodoList", "parse_todo_id"]
