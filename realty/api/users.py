"""User signup, login and logout endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from realty.api.dependencies import AUTH_HEADER, AuthContext, get_auth_context, get_current_user
from realty.database import get_db
from realty.exceptions import InvalidCredentialsError
from realty.models.user import User
from realty.schemas.auth import UserLogin, UserRegister, UserResponse
from realty.services.auth import authenticate_user, create_user, issue_token, revoke_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse)
def signup(
    user_data: UserRegister,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user and return a token in the ``x-auth`` header."""
    user = create_user(db, user_data.email, user_data.password)
    token = issue_token(db, user)

    logger.info(f"User {user.id} signed up")
    response.headers[AUTH_HEADER] = token
    return user


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/login", response_model=UserResponse)
def login(
    credentials: UserLogin,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password; a fresh token is returned in ``x-auth``."""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise InvalidCredentialsError()

    token = issue_token(db, user)

    logger.info(f"User {user.id} logged in")
    response.headers[AUTH_HEADER] = token
    return user


@router.delete("/me/token", status_code=status.HTTP_200_OK)
def logout(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    db: Annotated[Session, Depends(get_db)],
):
    """Revoke the token used for this request."""
    revoke_token(db, auth.user, auth.token)
    logger.info(f"User {auth.user.id} logged out")
    return Response(status_code=status.HTTP_200_OK)
