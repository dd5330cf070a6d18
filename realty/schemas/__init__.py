"""Pydantic schemas for API requests and responses."""

from realty.schemas.auth import UserLogin, UserRegister, UserResponse
from realty.schemas.property import (
    PropertyCreate,
    PropertyEnvelope,
    PropertyListResponse,
    PropertyResponse,
    PropertyUpdate,
)
from realty.schemas.todo import (
    TodoCreate,
    TodoEnvelope,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",
    "PropertyEnvelope",
    "PropertyListResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "TodoEnvelope",
    "TodoListResponse",
]
