"""Map service exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from realty.exceptions import (
    AuthenticationError,
    DependencyFailureError,
    DuplicateEmailError,
    InvalidCredentialsError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> Response:
    """401 with an empty body; the reason is never disclosed."""
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


async def not_found_handler(request: Request, exc: RecordNotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError) -> Response:
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def duplicate_email_handler(request: Request, exc: DuplicateEmailError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Email already registered"},
    )


async def dependency_failure_handler(request: Request, exc: DependencyFailureError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Unable to geocode address"},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request validation failures are plain 400s."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Storage error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Storage error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(RecordNotFoundError, not_found_handler)
    app.add_exception_handler(InvalidCredentialsError, invalid_credentials_handler)
    app.add_exception_handler(DuplicateEmailError, duplicate_email_handler)
    app.add_exception_handler(DependencyFailureError, dependency_failure_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
