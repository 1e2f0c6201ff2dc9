"""
Port interfaces (ABCs) for the tasks bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from taskapp.domain.tasks.entities import Task


class TaskRepository(ABC):
    """Port for persisting and retrieving tasks.

    Implementations raise StorageError when the backing store fails.
    """

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Insert a task without id, or overwrite the task with the same id.

        Returns:
            The stored task, carrying its assigned id.

        Raises:
            NotFoundError: If the task has an id and no stored task has it.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Return a task by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        """Return every stored task ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        """Remove the task with the given id."""
        raise NotImplementedError
