"""Authentication schemas."""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, Field


def normalize_email(value: object) -> object:
    """Trim and lowercase an email so uniqueness is case-insensitive."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


NormalizedEmail = Annotated[EmailStr, BeforeValidator(normalize_email)]


class UserRegister(BaseModel):
    """User registration request."""

    email: NormalizedEmail = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=72)


class UserLogin(BaseModel):
    """User login request."""

    email: NormalizedEmail = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response. Never carries the password hash or tokens."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
