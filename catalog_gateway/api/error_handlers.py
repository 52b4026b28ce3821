"""Error Handlers — global exception handlers for the gateway.

Invariants:
    - GatewayError → plain text public_message with the error's status
      (JSON {"error": message} when the error asks for a JSON body)
    - RequestValidationError → 400 plain text
    - Exception (catch-all) → 500 plain text, never leaks internal details
    - Full upstream detail is logged, never returned

Design Decisions:
    - Three-layer handler: domain (GatewayError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog_gateway.core.errors import GatewayError, ErrorSeverity

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:
    """Register gateway domain/upstream error handler."""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Handle all gateway errors."""
        ctx = exc.context
        ctx.path = request.url.path
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": ctx.path,
                "method": request.method,
                "upstream_url": ctx.upstream_url,
                "upstream_status": ctx.upstream_status,
                "upstream_body": ctx.upstream_body,
            },
        )
        if exc.json_body:
            return JSONResponse(
                status_code=exc.http_status,
                content={"error": exc.public_message},
            )
        return PlainTextResponse(exc.public_message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return PlainTextResponse(
            INVALID_REQUEST_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
