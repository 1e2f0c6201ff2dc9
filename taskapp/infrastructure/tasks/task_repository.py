"""
Adapter: Task repository.

Implements TaskRepository port on top of the SQLAlchemy ORM.
Driver errors are converted to StorageError with the driver exception
chained; logging them is left to the boundary.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from taskapp.domain.tasks.entities import Task
from taskapp.domain.tasks.errors import NotFoundError, StorageError
from taskapp.domain.tasks.ports import TaskRepository
from taskapp.infrastructure.tasks.models import TaskRecord

logger = logging.getLogger(__name__)

RESOURCE_NAME = "Task"


def _to_entity(record: TaskRecord) -> Task:
    return Task(
        id=record.id,
        title=record.title,
        description=record.description,
        completed=record.completed,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    """Persists tasks to the ``tasks`` table.

    Each call opens its own session. Writes run in a transaction that
    commits when the call returns.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def save(self, task: Task) -> Task:
        """Insert a new task or overwrite an existing one.

        Args:
            task: Task to store. Without an id a new row is inserted and
                the database assigns the id. With an id, that row must
                still exist; ids are never chosen by the caller.

        Returns:
            The stored task with its id.

        Raises:
            NotFoundError: If ``task.id`` names a row that no longer exists.
            StorageError: If the database fails.
        """
        try:
            with self._session_factory.begin() as session:
                if task.id is None:
                    record = TaskRecord()
                    session.add(record)
                else:
                    record = session.get(TaskRecord, task.id)
                    if record is None:
                        raise NotFoundError(RESOURCE_NAME, task.id)
                record.title = task.title
                record.description = task.description
                record.completed = task.completed
                session.flush()
                stored = _to_entity(record)
        except SQLAlchemyError as exc:
            raise StorageError("save") from exc

        logger.debug("Saved task id=%d.", stored.id)
        return stored

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Return a task by its id, or None if not found."""
        try:
            with self._session_factory() as session:
                record = session.get(TaskRecord, task_id)
                return _to_entity(record) if record is not None else None
        except SQLAlchemyError as exc:
            raise StorageError("find_by_id") from exc

    def find_all(self) -> list[Task]:
        """Return every stored task ordered by id."""
        try:
            with self._session_factory() as session:
                records = session.scalars(select(TaskRecord).order_by(TaskRecord.id)).all()
                return [_to_entity(r) for r in records]
        except SQLAlchemyError as exc:
            raise StorageError("find_all") from exc

    def delete_by_id(self, task_id: int) -> None:
        """Remove the task with the given id. Missing ids are ignored."""
        try:
            with self._session_factory.begin() as session:
                session.execute(delete(TaskRecord).where(TaskRecord.id == task_id))
        except SQLAlchemyError as exc:
            raise StorageError("delete_by_id") from exc

        logger.debug("Deleted task id=%d.", task_id)
