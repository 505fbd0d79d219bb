"""Exceptions raised by the todo core."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for todo errors."""


class InvalidTodoIdError(TodoError, ValueError):
    """Raised when a todo identifier cannot be parsed."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"invalid todo id: {raw!r}")
