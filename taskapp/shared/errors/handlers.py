"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskapp.domain.tasks.errors import (
    NotFoundError,
    StorageError,
    TaskDomainError,
    ValidationError,
)
from taskapp.shared.errors.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_429 = 429
HTTP_500 = 500

STORAGE_ERROR_MESSAGE = "Storage operation failed"
DOMAIN_ERROR_MESSAGE = "Internal server error"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
REQUEST_VALIDATION_MESSAGE = "Request validation failed"


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def build_error_response(
    request: Request,
    status_code: int,
    message: str,
    details: list[str] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response.

    Args:
        request: The request that failed; its path is echoed back.
        status_code: HTTP status code of the response.
        message: Client-facing message.
        details: Optional list of individual findings.

    Returns:
        A JSONResponse carrying an ErrorResponse body.
    """
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=_reason_phrase(status_code),
        message=message,
        path=request.url.path,
        details=details or [],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle invalid task fields or ids."""
        logger.warning("Bad request on %s: %s", request.url.path, exc.reason)
        return build_error_response(request, HTTP_400, exc.reason)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(
        request: Request, exc: NotFoundError
    ) -> JSONResponse:
        """Handle references to missing tasks."""
        logger.warning("Resource not found: %s", exc.message)
        return build_error_response(request, HTTP_404, exc.message)

    @app.exception_handler(StorageError)
    async def handle_storage(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        """Handle storage failures. The driver error is logged only."""
        logger.error(
            "Storage error during %s on %s", exc.operation, request.url.path,
            exc_info=exc,
        )
        return build_error_response(request, HTTP_500, STORAGE_ERROR_MESSAGE)

    @app.exception_handler(TaskDomainError)
    async def handle_task_domain(
        request: Request, exc: TaskDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled tasks domain errors."""
        logger.error("Unhandled tasks domain error: %s", exc.message)
        return build_error_response(request, HTTP_500, DOMAIN_ERROR_MESSAGE)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies and path parameters the framework could not parse."""
        details = [_format_validation_error(e) for e in exc.errors()]
        logger.warning("Request validation failed on %s: %s", request.url.path, details)
        return build_error_response(
            request, HTTP_400, REQUEST_VALIDATION_MESSAGE, details=details
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render framework HTTP errors (unknown route, bad method) uniformly."""
        response = build_error_response(request, exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return build_error_response(request, HTTP_500, UNEXPECTED_ERROR_MESSAGE)
