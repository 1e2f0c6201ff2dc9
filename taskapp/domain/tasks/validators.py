"""
Validation rules for tasks and task identifiers.

Pure functions: each one returns None for valid input and raises
ValidationError with a human-readable reason otherwise.
"""

from typing import Optional

from taskapp.domain.tasks.entities import Task
from taskapp.domain.tasks.errors import ValidationError

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
# Largest value a signed 64-bit INTEGER column can hold
TASK_ID_MAX = 2**63 - 1


def validate_task_id(task_id: Optional[int]) -> None:
    """Check that a task id is present, positive and fits the id column.

    Args:
        task_id: The identifier to check.

    Raises:
        ValidationError: If the id is None, not greater than zero, or
            larger than TASK_ID_MAX.
    """
    if task_id is None:
        raise ValidationError("Task id must not be null")
    if task_id <= 0:
        raise ValidationError("Task id must be a positive number")
    if task_id > TASK_ID_MAX:
        raise ValidationError(f"Task id must not exceed {TASK_ID_MAX}")


def validate_task(task: Optional[Task]) -> None:
    """Check title and description constraints of a candidate task.

    The minimum title length is measured after trimming whitespace,
    the maximum on the title as given.

    Args:
        task: The candidate task.

    Raises:
        ValidationError: On the first rule the task breaks.
    """
    if task is None:
        raise ValidationError("Task must not be null")

    title = task.title
    if title is None or not title.strip():
        raise ValidationError("Task title is required")
    if len(title.strip()) < TITLE_MIN_LENGTH:
        raise ValidationError(
            f"Task title must be at least {TITLE_MIN_LENGTH} characters long"
        )
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Task title must not exceed {TITLE_MAX_LENGTH} characters"
        )

    if task.description is not None and len(task.description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Task description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
        )
