"""
ORM models for the tasks bounded context.

Persistence shapes only. The domain Task entity is mapped to and from
these rows inside the repository adapter.
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from taskapp.domain.tasks.validators import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from taskapp.infrastructure.database import Base


class TaskRecord(Base):
    """Row of the ``tasks`` table."""

    __tablename__ = "tasks"
    # Ids of deleted rows are never handed out again on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True
    )
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"TaskRecord(id={self.id}, title={self.title!r}, completed={self.completed})"
