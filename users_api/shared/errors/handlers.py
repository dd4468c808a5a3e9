"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error body has the shape ``{"Error": "<message>"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.domain.users.errors import (
    DatabaseError,
    UserNotFoundError,
    UserServiceError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

USER_NOT_FOUND = "User not found"
DATABASE_ERROR = "Database error"
INVALID_REQUEST = "Invalid request"
INTERNAL_ERROR = "Internal server error"

# Exactly one entry per concrete UserServiceError subclass.
_DOMAIN_ERRORS: dict[type[UserServiceError], tuple[int, str]] = {
    UserNotFoundError: (HTTP_404, USER_NOT_FOUND),
    DatabaseError: (HTTP_500, DATABASE_ERROR),
}


def error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str] = {"Error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def translate_error(exc: UserServiceError) -> JSONResponse:
    """Map a domain error to its HTTP status and body.

    Logs the error at a level matching its kind. A DatabaseError's
    cause goes to the log only.

    Raises:
        TypeError: If ``exc`` is not one of the known domain errors.
    """
    try:
        status_code, message = _DOMAIN_ERRORS[type(exc)]
    except KeyError:
        raise TypeError(f"Untranslatable domain error: {type(exc).__name__}") from exc

    if isinstance(exc, DatabaseError):
        logger.error(
            "Database error: %r",
            exc.cause,
            exc_info=(type(exc.cause), exc.cause, exc.cause.__traceback__),
        )
    else:
        logger.warning("%s", exc.message)

    return error_response(status_code, message)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserServiceError)
    async def handle_user_service_error(
        _request: Request, exc: UserServiceError
    ) -> JSONResponse:
        """Translate users domain errors."""
        return translate_error(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed bodies and path parameters with 400."""
        detail = _describe_validation_errors(exc)
        logger.warning("Invalid request: %s", detail)
        return error_response(HTTP_400, INVALID_REQUEST, detail)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR)
