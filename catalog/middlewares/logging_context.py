"""
Middleware for injecting contextual fields into structured logs.

This middleware adds request-specific information to the log context
that will be included in all log messages during request processing.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog.logging import clear_log_context, logger, set_log_context
from catalog.settings import app_settings


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject contextual fields into structured logs.

    This middleware:
    - Adds endpoint and method to log context
    - Logs one line per completed request (except excluded paths)
    - Clears log context after request completes
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and inject logging context.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            Response from the endpoint.
        """
        path = request.url.path
        set_log_context(endpoint=path, method=request.method)

        try:
            response = await call_next(request)

            set_log_context(status_code=response.status_code)
            if path not in app_settings.LOG_EXCLUDED_PATHS:
                logger.info(
                    f"{request.method} {path} -> {response.status_code}"
                )
            return response
        finally:
            clear_log_context()
