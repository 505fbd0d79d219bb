"""Todo page and htmx fragment endpoints."""

from __future__ import annotations

import asyncio
import logging

from fastapi import FastAPI, Form, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.todo import TodoList

from ..dependencies import render, todo_id_or_400

logger = logging.getLogger(__name__)


def register_todo_routes(app: FastAPI, todo_list: TodoList, templates: Jinja2Templates) -> None:
    """Register the HTML todo endpoints."""

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        """Render the full page."""
        todos = await asyncio.to_thread(todo_list.todos)
        return render(templates, request, "index.html", {"todos": todos})

    @app.post("/todos")
    async def add_todo(description: str = Form("")) -> RedirectResponse:
        """Add a todo and send the browser back to the list."""
        item = await asyncio.to_thread(todo_list.add, description)
        logger.info("Created todo %s", item.id)
        return RedirectResponse("/", status_code=303)

    @app.get("/todos", response_class=HTMLResponse)
    async def search_todos(request: Request, search: str = "") -> HTMLResponse:
        """Render the items matching ``search``."""
        todos = await asyncio.to_thread(todo_list.search, search)
        return render(templates, request, "items.html", {"todos": todos})

    @app.post("/todos/sort", response_class=HTMLResponse)
    async def sort_todos(request: Request) -> HTMLResponse:
        """Reorder the list from the repeated ``id`` form field."""
        form = await request.form()
        ids = [todo_id_or_400(raw) for raw in form.getlist("id")]
        await asyncio.to_thread(todo_list.reorder, ids)
        todos = await asyncio.to_thread(todo_list.todos)
        return render(templates, request, "items.html", {"todos": todos})

    @app.post("/todos/{todo_id}/toggle", response_class=HTMLResponse)
    async def toggle_todo(request: Request, todo_id: str) -> Response:
        """Toggle a todo and render its updated row."""
        parsed = todo_id_or_400(todo_id)
        item = await asyncio.to_thread(todo_list.toggle_done, parsed)
        if item is None:
            # unknown ids are a no-op; nothing to swap in
            logger.warning("Toggle requested for unknown todo %s", parsed)
            return Response(status_code=200)
        return render(templates, request, "item.html", {"todo": item})

    @app.delete("/todos/{todo_id}")
    async def delete_todo(todo_id: str) -> Response:
        """Delete a todo. The empty body lets htmx drop the row."""
        parsed = todo_id_or_400(todo_id)
        deleted = await asyncio.to_thread(todo_list.delete, parsed)
        if not deleted:
            logger.debug("Delete requested for unknown todo %s", parsed)
        return Response(status_code=200)
