"""
Service: CRUD operations over tasks.

Input: TaskCommand and/or a task id
Output: TaskResult, list[TaskResult] or None
Side effects: Writes to the task repository (create, update, delete).
Failure cases: ValidationError, NotFoundError, StorageError.

StorageError is not logged here; the boundary logs it once with the
chained driver error.
"""

import logging
from dataclasses import replace
from typing import Optional

from taskapp.application.tasks.dtos import TaskCommand, TaskResult
from taskapp.domain.tasks.entities import Task
from taskapp.domain.tasks.errors import NotFoundError
from taskapp.domain.tasks.ports import TaskRepository
from taskapp.domain.tasks.validators import validate_task, validate_task_id

logger = logging.getLogger(__name__)

RESOURCE_NAME = "Task"


def _to_candidate(command: Optional[TaskCommand]) -> Optional[Task]:
    if command is None:
        return None
    return Task(
        title=command.title,
        description=command.description,
        completed=command.completed,
    )


def _to_result(task: Task) -> TaskResult:
    return TaskResult(
        id=task.id,
        title=task.title,
        description=task.description,
        completed=task.completed,
    )


class TaskService:
    """Orchestrates validation and persistence of tasks.

    Every operation is a single step against the repository. The
    existence check in update and delete is not atomic with the write
    that follows it; concurrent writers on the same id are not guarded.
    """

    def __init__(self, repository: TaskRepository) -> None:
        """Initialize the service.

        Args:
            repository: Storage port for tasks.
        """
        self._repository = repository

    def list_tasks(self) -> list[TaskResult]:
        """Return every stored task.

        Raises:
            StorageError: If the repository fails.
        """
        logger.info("Listing all tasks")
        return [_to_result(t) for t in self._repository.find_all()]

    def create(self, command: Optional[TaskCommand]) -> TaskResult:
        """Validate and persist a new task.

        Args:
            command: Fields of the task to create.

        Returns:
            The stored task including its newly assigned id.

        Raises:
            ValidationError: If the task breaks a field constraint.
            StorageError: If the repository fails.
        """
        candidate = _to_candidate(command)
        logger.info(
            "Creating task: title=%r", candidate.title if candidate else None
        )
        validate_task(candidate)

        stored = self._repository.save(candidate)
        logger.info("Task created with id=%d", stored.id)
        return _to_result(stored)

    def get(self, task_id: Optional[int]) -> TaskResult:
        """Return a single task.

        Raises:
            ValidationError: If the id is missing or out of range.
            NotFoundError: If no task has this id.
        """
        logger.info("Fetching task id=%s", task_id)
        return _to_result(self._get_existing(task_id))

    def update(
        self, task_id: Optional[int], command: Optional[TaskCommand]
    ) -> TaskResult:
        """Overwrite title, description and completed flag of a task.

        The id of the stored task never changes.

        Args:
            task_id: Id of the task to update.
            command: Replacement field values.

        Returns:
            The updated task.

        Raises:
            ValidationError: If the id or the new fields are invalid.
            NotFoundError: If no task has this id, including when it is
                deleted between the lookup and the write.
            StorageError: If the repository fails.
        """
        logger.info("Updating task id=%s", task_id)
        validate_task_id(task_id)
        candidate = _to_candidate(command)
        validate_task(candidate)

        existing = self._get_existing(task_id)
        updated = replace(
            existing,
            title=candidate.title,
            description=candidate.description,
            completed=candidate.completed,
        )

        stored = self._repository.save(updated)
        logger.info("Task updated id=%d", task_id)
        return _to_result(stored)

    def delete(self, task_id: Optional[int]) -> None:
        """Remove a task.

        Deleting an id twice fails the second time.

        Raises:
            ValidationError: If the id is missing or out of range.
            NotFoundError: If no task has this id.
            StorageError: If the repository fails.
        """
        logger.info("Deleting task id=%s", task_id)
        self._get_existing(task_id)
        self._repository.delete_by_id(task_id)
        logger.info("Task deleted id=%d", task_id)

    def _get_existing(self, task_id: Optional[int]) -> Task:
        validate_task_id(task_id)
        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.warning("Task not found: id=%d", task_id)
            raise NotFoundError(RESOURCE_NAME, task_id)
        return task
