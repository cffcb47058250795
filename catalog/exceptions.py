"""
Custom exception classes for the application.

Every application exception carries the HTTP status it maps to, so
handlers can raise them freely and the exception handlers registered on
the app render a consistent error envelope.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when request parameters (pagination, sort field, sort order)
    fail validation checks before processing.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a referenced author or book does not exist.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class ConflictError(AppException):
    """
    Resource conflict.

    Raised when an operation conflicts with existing state (duplicate
    email, deleting an author who still owns books).

    HTTP Status: 409 Conflict
    """

    http_status = 409


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when a database operation encounters an error that should be
    handled at the application level.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
