"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class TodoResponse(BaseModel):
    """Serialized todo item."""

    id: UUID
    description: str = Field(..., description="Free text, may be empty")
    done: bool
