"""JSON endpoints."""

from __future__ import annotations

import asyncio
from typing import List

from fastapi import FastAPI

from src.todo import TodoList

from ..dependencies import serialize_todo
from ..schemas import HealthResponse, TodoResponse


def register_api_routes(app: FastAPI, todo_list: TodoList) -> None:
    """Register the read-only JSON endpoints."""

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/api/todos", response_model=List[TodoResponse])
    async def list_todos() -> List[TodoResponse]:
        """List todos in display order."""
        todos = await asyncio.to_thread(todo_list.todos)
        return [serialize_todo(todo) for todo in todos]
