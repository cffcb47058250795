"""
Exception handlers that render every error as the unified error envelope.

Handlers are registered on the application so route functions can raise
AppException subclasses (or let database errors propagate) without
try/except blocks.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.exceptions import (
    AppException,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from catalog.logging import logger
from catalog.schemas.errors import ErrorCode, ErrorEnvelope, HTTPErrorResponse


def exception_to_error_code(exception: AppException) -> str:
    """
    Map AppException type to standard error code.

    Args:
        exception: AppException instance.

    Returns:
        Error code string from ErrorCode constants.
    """
    exception_map = {
        ValidationError: ErrorCode.VALIDATION_ERROR,
        NotFoundError: ErrorCode.NOT_FOUND,
        ConflictError: ErrorCode.CONFLICT,
        DatabaseError: ErrorCode.DATABASE_ERROR,
    }
    return exception_map.get(type(exception), ErrorCode.INTERNAL_ERROR)


def http_error_response(
    status_code: int,
    code: str,
    msg: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Create HTTP error response with unified envelope.

    Args:
        status_code: HTTP status of the response.
        code: Machine-readable error code (use ErrorCode constants).
        msg: Human-readable error message.
        details: Optional additional context.

    Returns:
        JSONResponse with ``{"error": {"code", "msg", "details"}}`` body.
    """
    body = HTTPErrorResponse(
        error=ErrorEnvelope(code=code, msg=msg, details=details)
    )
    return JSONResponse(
        status_code=status_code, content=jsonable_encoder(body)
    )


async def app_exception_handler(
    request: Request, ex: AppException
) -> JSONResponse:
    logger.warning(
        f"{type(ex).__name__} on {request.method} {request.url.path}: {ex.message}",
        extra={"exception_type": type(ex).__name__},
    )
    return http_error_response(
        ex.http_status, exception_to_error_code(ex), ex.message
    )


async def request_validation_handler(
    request: Request, ex: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and non-numeric query numbers are invalid requests."""
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in ex.errors()
    ]
    logger.warning(
        f"Invalid request on {request.method} {request.url.path}: {errors}"
    )
    return http_error_response(
        400,
        ErrorCode.INVALID_DATA,
        "Invalid request parameters",
        {"errors": errors},
    )


async def database_exception_handler(
    request: Request, ex: SQLAlchemyError
) -> JSONResponse:
    logger.error(
        f"Database error on {request.method} {request.url.path}: {ex}",
        exc_info=True,
    )
    return http_error_response(
        500, ErrorCode.DATABASE_ERROR, "Database error occurred"
    )


async def unhandled_exception_handler(
    request: Request, ex: Exception
) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {ex}",
        exc_info=True,
    )
    return http_error_response(
        500, ErrorCode.INTERNAL_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all catalog exception handlers on the application.

    Args:
        app: FastAPI application to configure.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_handler
    )
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
