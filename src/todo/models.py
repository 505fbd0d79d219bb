from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from .exceptions import InvalidTodoIdError


@dataclass(slots=True)
class TodoItem:
    """A single entry of the todo list."""

    description: str
    done: bool = False
    id: UUID = field(default_factory=uuid4)


def parse_todo_id(raw: str) -> UUID:
    """Parse a todo identifier coming from a URL or form field."""
    try:
        return UUID(str(raw).strip())
    except ValueError as exc:
        raise InvalidTodoIdError(raw) from exc
