"""Error Handlers — global exception handlers for the customer health API.

Invariants:
    - AppError → status/code from its kind, {error: code, message}
    - RequestValidationError → 400 {error: "Validation failed", details: [{path, message}]}
    - Unmatched route → 404 {error: "Not Found", message}
    - Exception (catch-all) → 500, logged with traceback, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (AppError), validation (Pydantic), HTTP (Starlette),
      catch-all (Exception)
    - Extracted from main.py to keep the app factory short
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from customer_health.api.validation import validation_details
from customer_health.core.errors import AppError

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {
    "error": "Not Found",
    "message": "The requested resource does not exist",
}
INTERNAL_ERROR_BODY = {
    "error": "INTERNAL_SERVER_ERROR",
    "message": "An unexpected error occurred",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_app_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_app_error_handler(app: FastAPI) -> None:
    """Register application error handler."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle all recognised application errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"AppError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "operation": exc.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": validation_details(exc.errors()),
            },
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors (404, 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = NOT_FOUND_BODY
        else:
            content = {
                "error": HTTPStatus(exc.status_code).phrase,
                "message": str(exc.detail),
            }
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )
