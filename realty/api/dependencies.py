"""FastAPI dependencies for authentication, database and services."""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from realty.database import get_db
from realty.exceptions import AuthenticationError
from realty.models.user import User
from realty.services.auth import validate_token
from realty.services.geocoding import GeocodingService, get_geocoding_service
from realty.services.ownership import parse_record_id
from realty.services.property_service import PropertyService
from realty.services.todo_service import TodoService

AUTH_HEADER = "x-auth"

auth_header = APIKeyHeader(name=AUTH_HEADER, auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """The authenticated user and the token they presented."""

    user: User
    token: str


def get_auth_context(
    token: Annotated[str | None, Depends(auth_header)],
    db: Annotated[Session, Depends(get_db)],
) -> AuthContext:
    """Resolve the ``x-auth`` header to a user, or reject the request with 401."""
    user = validate_token(db, token)
    if user is None:
        raise AuthenticationError()
    return AuthContext(user=user, token=token)


def get_current_user(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
) -> User:
    """Get the current authenticated user."""
    return auth.user


def get_property_service(
    db: Annotated[Session, Depends(get_db)],
    geocoder: Annotated[GeocodingService, Depends(get_geocoding_service)],
) -> PropertyService:
    """Get property service with dependencies."""
    return PropertyService(db, geocoder)


def get_todo_service(
    db: Annotated[Session, Depends(get_db)],
) -> TodoService:
    """Get todo service with dependencies."""
    return TodoService(db)


def valid_property_id(property_id: str) -> UUID:
    """Parse the listing id path parameter, 404 if malformed."""
    return parse_record_id(property_id)


def valid_todo_id(todo_id: str) -> UUID:
    """Parse the todo id path parameter, 404 if malformed."""
    return parse_record_id(todo_id)
