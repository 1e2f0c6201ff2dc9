"""
Error body returned by every error handler.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers.

    Attributes:
        timestamp: When the error was produced (UTC).
        status: HTTP status code.
        error: HTTP reason phrase, e.g. "Not Found".
        message: Human-readable description safe to show to clients.
        path: Request path that produced the error.
        details: Additional findings, one entry per problem.
    """

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    details: list[str] = Field(default_factory=list)
