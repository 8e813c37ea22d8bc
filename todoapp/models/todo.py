"""To-do item model."""

from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """A task owned by exactly one user."""

    id: str
    user_id: str
    title: str
    completed: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateTodoRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500)


class UpdateTodoRequest(BaseModel):
    completed: bool
