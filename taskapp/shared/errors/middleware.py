"""
Middleware turning unhandled exceptions into the standard 500 response.

Starlette runs the ``Exception`` handler in its outermost middleware, so
those responses would skip the security and CORS headers. This middleware
sits inside both of them and answers first.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from taskapp.shared.errors.handlers import (
    HTTP_500,
    UNEXPECTED_ERROR_MESSAGE,
    build_error_response,
)

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Answers any exception no handler claimed with a generic 500."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unexpected error: %s", type(exc).__name__)
            return build_error_response(request, HTTP_500, UNEXPECTED_ERROR_MESSAGE)
