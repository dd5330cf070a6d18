"""Todo endpoints. Every route is scoped to the current user."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from realty.api.dependencies import get_current_user, get_todo_service, valid_todo_id
from realty.models.user import User
from realty.schemas.todo import (
    TodoCreate,
    TodoEnvelope,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)
from realty.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


@router.post("", response_model=TodoResponse)
def create_todo(
    todo_data: TodoCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a todo."""
    return service.create(current_user, todo_data)


@router.get("", response_model=TodoListResponse)
def get_todos(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get the current user's todos."""
    return {"todos": service.list_mine(current_user)}


@router.get("/{todo_id}", response_model=TodoEnvelope)
def get_todo(
    current_user: Annotated[User, Depends(get_current_user)],
    todo_id: Annotated[UUID, Depends(valid_todo_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get one of the current user's todos."""
    return {"todo": service.get_by_id(current_user, todo_id)}


@router.patch("/{todo_id}", response_model=TodoEnvelope)
def update_todo(
    current_user: Annotated[User, Depends(get_current_user)],
    todo_id: Annotated[UUID, Depends(valid_todo_id)],
    todo_data: TodoUpdate,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Update text or completion of one of the current user's todos."""
    return {"todo": service.update(current_user, todo_id, todo_data)}


@router.delete("/{todo_id}", response_model=TodoEnvelope)
def delete_todo(
    current_user: Annotated[User, Depends(get_current_user)],
    todo_id: Annotated[UUID, Depends(valid_todo_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Delete one of the current user's todos."""
    return {"todo": service.remove(current_user, todo_id)}
