"""
Secure HTTP headers middleware.

Adds security-related headers to every response, and marks task
payloads as non-cacheable since any write can change them.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}

NO_STORE_PREFIX = "/tasks"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds SECURE_HEADERS to every response.

    Responses under ``<api_prefix>/tasks`` also get ``Cache-Control: no-store``.
    """

    def __init__(self, app: ASGIApp, api_prefix: str = "") -> None:
        super().__init__(app)
        self._no_store_prefix = api_prefix + NO_STORE_PREFIX

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        if request.url.path.startswith(self._no_store_prefix):
            response.headers["Cache-Control"] = "no-store"
        return response
