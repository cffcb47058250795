"""
Unified error envelope models.

Every non-2xx response of the catalog API has the same shape:

    {
        "error": {
            "code": "not_found",
            "msg": "Author with ID 7f3c... not found",
            "details": null
        }
    }
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    """
    Unified error envelope structure.

    Attributes:
        code: Machine-readable error code for client-side error handling.
        msg: Human-readable error description for display.
        details: Optional additional context (field errors, request id).
    """

    code: str = Field(
        ...,
        description="Machine-readable error code (e.g., 'validation_error', 'not_found')",
    )
    msg: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error context and metadata",
    )


class HTTPErrorResponse(BaseModel):
    """HTTP error response envelope."""

    error: ErrorEnvelope = Field(..., description="Error details envelope")


class ErrorCode:
    """
    Standard error codes for consistent error reporting.

    Categories:
    - Validation errors: INVALID_DATA, VALIDATION_ERROR
    - Resource errors: NOT_FOUND, CONFLICT
    - System errors: DATABASE_ERROR, INTERNAL_ERROR
    """

    # Validation errors
    INVALID_DATA = "invalid_data"
    VALIDATION_ERROR = "validation_error"

    # Resource errors
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

    # System errors
    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"
