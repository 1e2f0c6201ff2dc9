"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from taskapp.core.config import settings
from taskapp.shared.errors.handlers import HTTP_429, build_error_response

RATE_LIMIT_MESSAGE = "Rate limit exceeded"

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error body.

    Must stay synchronous: SlowAPIMiddleware replaces coroutine handlers
    with slowapi's own default handler.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return build_error_response(
        request,
        HTTP_429,
        RATE_LIMIT_MESSAGE,
        details=[str(exc.detail)],
    )
