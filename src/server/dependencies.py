"""Helpers shared across FastAPI routes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.todo import InvalidTodoIdError, TodoItem, parse_todo_id

from .schemas import TodoResponse

logger = logging.getLogger(__name__)

SERVER_DIR = Path(__file__).parent
TEMPLATES_DIR = SERVER_DIR / "templates"
STATIC_DIR = SERVER_DIR / "static"


def build_templates(directory: Optional[Path] = None) -> Jinja2Templates:
    """Create the Jinja2 environment used by the HTML routes."""
    return Jinja2Templates(directory=str(directory or TEMPLATES_DIR))


def render(
    templates: Jinja2Templates,
    request: Request,
    name: str,
    context: Dict[str, Any],
) -> HTMLResponse:
    """Render a template, turning render failures into a 500."""
    try:
        return templates.TemplateResponse(request, name, context)
    except Exception as exc:
        logger.exception("Failed to render %s: %s", name, exc)
        raise HTTPException(status_code=500, detail=f"Failed to render {name}") from exc


def todo_id_or_400(raw: str) -> UUID:
    """Parse a todo id from the request, answering 400 when malformed."""
    try:
        return parse_todo_id(raw)
    except InvalidTodoIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def serialize_todo(item: TodoItem) -> TodoResponse:
    """Convert domain TodoItem to API response."""
    return TodoResponse(id=item.id, description=item.description, done=item.done)
