"""
Domain entities for the tasks bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Task:
    """A single to-do item.

    ``id`` is None until the task has been persisted; the storage layer
    assigns it exactly once. ``title`` may be None on an unvalidated
    candidate, never on a stored task.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False
