"""
Pydantic schemas for the tasks API.

Request schemas only enforce types. Field constraints (title and
description lengths) are enforced by the domain validator so that
violations surface as 400 responses with a domain message.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field


class TaskRequest(BaseModel):
    """Request schema for creating or updating a task.

    An ``id`` sent in the body is ignored.

    Attributes:
        title: Task title (3-100 chars once trimmed).
        description: Optional description (up to 500 chars).
        completed: Completion flag, false when omitted.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, description="Task title")
    description: str | None = Field(default=None, description="Task description")
    completed: bool = Field(default=False, description="Whether the task is done")


class TaskResponse(BaseModel):
    """Response schema for a stored task."""

    id: int
    title: str
    description: str | None
    completed: bool


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
