"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database. The API is exercised
through FastAPI's dependency overrides, so no file or server is touched.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Iterator  # noqa: E402
from typing import Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from taskapp.application.tasks.task_service import TaskService  # noqa: E402
from taskapp.domain.tasks.entities import Task  # noqa: E402
from taskapp.domain.tasks.errors import NotFoundError  # noqa: E402
from taskapp.domain.tasks.ports import TaskRepository  # noqa: E402
from taskapp.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    init_schema,
)
from taskapp.infrastructure.tasks.task_repository import (  # noqa: E402
    SqlAlchemyTaskRepository,
)
from taskapp.interfaces.tasks.dependencies import get_task_service  # noqa: E402
from taskapp.main import app  # noqa: E402


class InMemoryTaskRepository(TaskRepository):
    """Dict-backed TaskRepository used to test the service in isolation."""

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self._next_id = 1

    def save(self, task: Task) -> Task:
        if task.id is None:
            task = Task(
                id=self._next_id,
                title=task.title,
                description=task.description,
                completed=task.completed,
            )
            self._next_id += 1
        elif task.id not in self.tasks:
            raise NotFoundError("Task", task.id)
        self.tasks[task.id] = task
        return task

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def find_all(self) -> list[Task]:
        return [self.tasks[k] for k in sorted(self.tasks)]

    def delete_by_id(self, task_id: int) -> None:
        self.tasks.pop(task_id, None)


@pytest.fixture
def memory_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def service(memory_repository: InMemoryTaskRepository) -> TaskService:
    return TaskService(repository=memory_repository)


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = build_engine("sqlite://")
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return build_session_factory(engine)


@pytest.fixture
def repository(session_factory: sessionmaker) -> SqlAlchemyTaskRepository:
    return SqlAlchemyTaskRepository(session_factory=session_factory)


@pytest.fixture
def client(repository: SqlAlchemyTaskRepository) -> Iterator[TestClient]:
    """TestClient whose TaskService is backed by the per-test database."""
    app.dependency_overrides[get_task_service] = lambda: TaskService(repository)
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
