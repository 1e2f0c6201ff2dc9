"""
Data Transfer Objects for the tasks application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskCommand:
    """Input DTO for creating or updating a task.

    Attributes:
        title: Task title, validated by the service.
        description: Optional free-text description.
        completed: Completion flag.
    """

    title: str | None = None
    description: str | None = None
    completed: bool = False


@dataclass(frozen=True)
class TaskResult:
    """Output DTO for a stored task.

    Attributes:
        id: Identifier assigned by the storage layer.
        title: Task title.
        description: Optional description.
        completed: Completion flag.
    """

    id: int
    title: str
    description: str | None
    completed: bool
