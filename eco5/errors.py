"""
Error taxonomy and the JSON error envelope returned by every failing route.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eco5.config import get_settings
from eco5.timestamps import utc_now_iso

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status and error code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_SERVER_ERROR"
    message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        error_code: Optional[str] = None,
        details: Any = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details
        super().__init__(self.message)


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"
    message = "Invalid input data"


class AuthTokenMissing(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTH_TOKEN_MISSING"
    message = "Access token required"


class AuthTokenInvalid(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTH_TOKEN_INVALID"
    message = "Invalid or expired token"


class AuthUserNotFound(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTH_USER_NOT_FOUND"
    message = "User not found"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "FORBIDDEN"
    message = "Forbidden"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"
    message = "Not found"


class UserAlreadyExists(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "USER_ALREADY_EXISTS"
    message = "User with this email already exists"


class MissingCredentials(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "MISSING_CREDENTIALS"
    message = "Email and password are required"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class NoUpdateFields(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "NO_UPDATE_FIELDS"
    message = "No valid fields to update"


class InternalServerError(ApiError):
    pass


def error_body(
    message: str, error_code: Optional[str] = None, details: Any = None
) -> dict:
    body: dict[str, Any] = {
        "success": False,
        "message": message,
        "timestamp": utc_now_iso(),
    }
    if error_code:
        body["error_code"] = error_code
    if details is not None:
        body["details"] = details
    return body


def _validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for err in exc.errors():
        # loc is ("body", "field", ...) / ("query", "limit"); drop the source.
        loc = [str(part) for part in err.get("loc", ())[1:]]
        details.append(
            {"field": ".".join(loc) or None, "message": err.get("msg", "")}
        )
    return details


def render_error(exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.error_code, exc.details),
    )


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return render_error(exc)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    source = ""
    if exc.errors():
        source = str(exc.errors()[0].get("loc", ("",))[0])
    message = (
        "Invalid query parameters" if source == "query" else "Invalid input data"
    )
    return render_error(ValidationFailed(message, details=_validation_details(exc)))


_HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            str(exc.detail), _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        ),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    settings = getattr(request.app.state, "settings", None) or get_settings()
    details = None
    if settings.is_development:
        details = {"name": type(exc).__name__, "message": str(exc)}
    return render_error(InternalServerError(details=details))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
