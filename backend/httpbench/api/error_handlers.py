"""Error Handlers — global exception handlers for the benchmark server.

Invariants:
    - InvalidJSONError → 400 plain text "Invalid JSON" (the only wire-level error)
    - HttpBenchError → structured JSON with error code, message, severity
    - Exception (catch-all) → 500, never leaks internal details
    - No 404 handler: unrouted paths keep the framework default

Design Decisions:
    - Handlers looked up by exception MRO, so the InvalidJSONError handler wins
      over the HttpBenchError one
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from httpbench.core.errors import HttpBenchError, InvalidJSONError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_invalid_json_handler(app)
    _register_httpbench_error_handler(app)
    _register_generic_error_handler(app)


def _register_invalid_json_handler(app: FastAPI) -> None:

    @app.exception_handler(InvalidJSONError)
    async def invalid_json_handler(request: Request, exc: InvalidJSONError):
        """Malformed body — plain-text 400."""
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_httpbench_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HttpBenchError)
    async def httpbench_error_handler(request: Request, exc: HttpBenchError):
        """Handle any other httpbench error raised inside a request."""
        logger.error(
            f"HttpBenchError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
