"""FastAPI application bootstrap."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.todo import TodoList
from src.todo_manager.config import Config

from .dependencies import STATIC_DIR, build_templates
from .routes import register_api_routes, register_todo_routes

logger = logging.getLogger(__name__)


def create_app(todo_list: Optional[TodoList] = None, config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application around ``todo_list``."""
    config = config or Config()
    if todo_list is None:
        todo_list = TodoList(case_sensitive_search=config.todo.case_sensitive_search)

    app = FastAPI(title="Todo Manager", version="1.0.0")
    app.state.config = config
    app.state.todo_list = todo_list

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    templates = build_templates()
    register_todo_routes(app, todo_list, templates)
    register_api_routes(app, todo_list)

    logger.debug("Application created")
    return app
