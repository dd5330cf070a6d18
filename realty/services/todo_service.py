"""Todo service."""

import logging
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from realty.models.todo import Todo
from realty.models.user import User
from realty.schemas.todo import TodoCreate, TodoUpdate
from realty.services.ownership import (
    delete_owned,
    find_owned,
    list_owned,
    parse_record_id,
    update_owned,
)

logger = logging.getLogger(__name__)


def completion_values(completed: bool) -> dict[str, Any]:
    """Column values for a completion change.

    Completing stamps ``completed_at`` with the current time, even when the
    todo was already complete. Un-completing always clears it.
    """
    if completed:
        return {"completed": True, "completed_at": datetime.now(UTC)}
    return {"completed": False, "completed_at": None}


class TodoService:
    """Service for a user's own todos. Every operation is owner-scoped."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user: User, data: TodoCreate) -> Todo:
        todo = Todo(text=data.text, completed=False, completed_at=None, owner_id=user.id)
        self.db.add(todo)
        self.db.commit()
        self.db.refresh(todo)
        return todo

    def list_mine(self, user: User) -> list[Todo]:
        return list_owned(self.db, Todo, user, Todo.created_at)

    def get_by_id(self, user: User, raw_id: str | UUID) -> Todo:
        return find_owned(self.db, Todo, parse_record_id(raw_id), user)

    def update(self, user: User, raw_id: str | UUID, data: TodoUpdate) -> Todo:
        """Update text and/or completion.

        ``completed_at`` is derived from ``completed``; if ``completed`` is not
        in the request both are left untouched.
        """
        record_id = parse_record_id(raw_id)
        values = data.model_dump(exclude_unset=True)
        if "completed" in values:
            values.update(completion_values(values["completed"]))

        return update_owned(self.db, Todo, record_id, user, values)

    def remove(self, user: User, raw_id: str | UUID) -> Todo:
        todo = delete_owned(self.db, Todo, parse_record_id(raw_id), user)
        logger.info(f"User {user.id} deleted todo {todo.id}")
        return todo
