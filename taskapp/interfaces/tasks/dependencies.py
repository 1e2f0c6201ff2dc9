"""
Dependency injection for the tasks bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the application service via constructor injection.
These are the composition root for the tasks context.
"""

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from taskapp.application.tasks.task_service import TaskService
from taskapp.core.config import settings
from taskapp.infrastructure.database import build_engine, build_session_factory
from taskapp.infrastructure.tasks.task_repository import SqlAlchemyTaskRepository


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.get_database_url())


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    """Return the process-wide session factory."""
    return build_session_factory(get_engine())


def get_task_service() -> TaskService:
    """Build TaskService with its infrastructure dependencies."""
    return TaskService(
        repository=SqlAlchemyTaskRepository(session_factory=get_session_factory()),
    )
