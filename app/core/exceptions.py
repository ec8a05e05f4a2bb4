"""
Global exception handling for the application.
Every failure is translated into the uniform error envelope
({"success": false, "message": ..., "errors": [...], "timestamp": ...}).
"""

import re
from typing import Any, Dict, List, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.responses import error_body

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(self.message)


class ValidationFailedException(AppError):
    """Request payload or parameters rejected."""
    def __init__(self, message: str = "Validation failed", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, errors)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status.HTTP_403_FORBIDDEN)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class ConflictException(AppError):
    """Duplicate unique key."""
    def __init__(self, message: str = "Resource already exists", field: Optional[str] = None):
        self.field = field
        super().__init__(message, status.HTTP_409_CONFLICT)


class DeleteBlockedException(ConflictException):
    """Delete refused because dependent rows still exist."""
    def __init__(self, message: str):
        super().__init__(message)
        self.status_code = status.HTTP_400_BAD_REQUEST


class UploadRejectedException(AppError):
    """Upload refused: missing file, wrong type, too large or unexpected field."""
    def __init__(self, message: str):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


_UNIQUE_PATTERNS = (
    # PostgreSQL: Key (email)=(a@b.c) already exists.
    re.compile(r"Key \((?P<field>[a-zA-Z_]+)\)=\("),
    # SQLite: UNIQUE constraint failed: users.email
    re.compile(r"UNIQUE constraint failed: \w+\.(?P<field>\w+)"),
)


def conflict_from_integrity_error(exc: IntegrityError) -> ConflictException:
    """Map a driver-level integrity violation onto the conflict taxonomy."""
    text = str(exc.orig) if exc.orig is not None else str(exc)
    for pattern in _UNIQUE_PATTERNS:
        match = pattern.search(text)
        if match:
            field = to_camel(match.group("field"))
            return ConflictException(f"{field} already exists", field=field)
    return ConflictException("Request conflicts with existing data")


def _json(status_code: int, message: str, errors: Optional[List[Dict[str, Any]]] = None, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, errors), headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Application error", path=request.url.path, error=exc.message)
    return _json(exc.status_code, exc.message, exc.errors)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")),
            "location": err.get("loc", ("body",))[0],
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return _json(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _json(exc.status_code, f"Route {request.url.path} not found")
    return _json(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    conflict = conflict_from_integrity_error(exc)
    logger.info("Integrity violation", path=request.url.path, field=conflict.field)
    return _json(conflict.status_code, conflict.message)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return _json(
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too many requests from this IP, please try again later",
        headers={"Retry-After": "60"},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unhandled error", path=request.url.path, error_type=type(exc).__name__)
    return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, global_exception_handler)
