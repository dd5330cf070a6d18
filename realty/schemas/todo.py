"""Todo schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from realty.schemas.base import CamelModel


class TodoCreate(CamelModel):
    """Create a new todo."""

    text: str = Field(..., min_length=1, max_length=1000)


class TodoUpdate(CamelModel):
    """Update a todo. ``completed_at`` is derived, never accepted."""

    text: str | None = Field(None, min_length=1, max_length=1000)
    completed: bool | None = None

    @field_validator("text", "completed")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class TodoResponse(CamelModel):
    """Todo response."""

    id: UUID
    text: str
    completed: bool
    completed_at: datetime | None
    owner_id: UUID
    created_at: datetime
    updated_at: datetime


class TodoEnvelope(CamelModel):
    """A single todo wrapped in ``{"todo": ...}``."""

    todo: TodoResponse


class TodoListResponse(CamelModel):
    """Todos wrapped in ``{"todos": [...]}``."""

    todos: list[TodoResponse]
