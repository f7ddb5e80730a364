"""
Global exception handlers for the FastAPI application.

This module translates the custom application exceptions into HTTP
responses. Every failure leaves the API in the same envelope,
``{"error": "<message>"}``, whatever layer raised it.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog import get_logger

from inkpost.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    IdentityVerificationError,
    InkpostError,
    InvalidCredentialsError,
    PermissionError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)

__all__ = [
    "error_response",
    "authentication_error_handler",
    "invalid_credentials_error_handler",
    "permission_error_handler",
    "identity_verification_error_handler",
    "validation_error_handler",
    "user_already_exists_error_handler",
    "user_not_found_error_handler",
    "database_error_handler",
    "inkpost_error_handler",
    "request_validation_error_handler",
    "http_exception_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error. Please try again."


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    """Build the single error envelope used by every handler."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    Raised when a protected endpoint is called without a bearer token.
    """
    logger.warning("Authentication failure", error=exc.code, path=request.url.path)
    return error_response(
        status.HTTP_401_UNAUTHORIZED, exc.message, headers={"WWW-Authenticate": "Bearer"}
    )


async def invalid_credentials_error_handler(
    request: Request, exc: InvalidCredentialsError
) -> JSONResponse:
    """Handles `InvalidCredentialsError`, returning a `403 Forbidden`."""
    logger.warning("Credential rejected", error=exc.code, path=request.url.path)
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def permission_error_handler(request: Request, exc: PermissionError) -> JSONResponse:
    """Handles `PermissionError`, returning a `403 Forbidden`.

    Invoked for tampered access tokens and for federated sign-ins that are
    not allowed to reach an existing password account.
    """
    logger.warning("Permission denied", error=exc.code, path=request.url.path)
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def identity_verification_error_handler(
    request: Request, exc: IdentityVerificationError
) -> JSONResponse:
    """Handles `IdentityVerificationError`, returning a `500`."""
    logger.warning("Identity provider rejected token", error=exc.code, path=request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handles `ValidationError` and its subclasses, returning a `403`."""
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def user_already_exists_error_handler(
    request: Request, exc: UserAlreadyExistsError
) -> JSONResponse:
    """Handles `UserAlreadyExistsError` (conflict), returning a `403`."""
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def user_not_found_error_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    """Handles `UserNotFoundError`, returning a `403`."""
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handles `DatabaseError`, returning a `500 Internal Server Error`.

    The message was chosen by the raising service; the underlying driver
    error has already been logged there.
    """
    logger.error("A database error occurred", error_message=exc.message, path=request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def inkpost_error_handler(request: Request, exc: InkpostError) -> JSONResponse:
    """Fallback for application errors without a more specific handler."""
    logger.error(
        "An unhandled application error occurred",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handles malformed request bodies, returning a `403` like domain validation."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_403_FORBIDDEN, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Re-shapes framework HTTP errors (404, 405, ...) into the error envelope."""
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception's MRO, so subclasses
    such as `InvalidCredentialsError` reach their own handler before the
    `AuthenticationError` one.
    """
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(InvalidCredentialsError, invalid_credentials_error_handler)
    app.add_exception_handler(IdentityVerificationError, identity_verification_error_handler)
    app.add_exception_handler(PermissionError, permission_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(UserAlreadyExistsError, user_already_exists_error_handler)
    app.add_exception_handler(UserNotFoundError, user_not_found_error_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(InkpostError, inkpost_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
