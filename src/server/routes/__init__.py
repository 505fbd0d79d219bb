"""Route registration helpers."""

from .api import register_api_routes
from .todo import register_todo_routes

__all__ = [
    "register_api_routes",
    "register_todo_routes",
]
