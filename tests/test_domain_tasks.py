"""
Tests for the tasks domain layer.

Tests the Task entity, validation rules and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from taskapp.domain.tasks.entities import Task
from taskapp.domain.tasks.errors import (
    NotFoundError,
    StorageError,
    TaskDomainError,
    ValidationError,
)
from taskapp.domain.tasks.validators import (
    DESCRIPTION_MAX_LENGTH,
    TASK_ID_MAX,
    TITLE_MAX_LENGTH,
    validate_task,
    validate_task_id,
)


class TestTaskEntity:
    """Tests for the Task entity."""

    def test_defaults(self) -> None:
        """A new task has no id, no description and is not completed."""
        task = Task(title="Buy milk")
        assert task.id is None
        assert task.description is None
        assert task.completed is False

    def test_task_is_immutable(self) -> None:
        """Fields of a task cannot be reassigned."""
        task = Task(id=1, title="Buy milk")
        with pytest.raises(AttributeError):
            task.id = 2  # type: ignore[misc]


class TestValidateTask:
    """Tests for validate_task."""

    @pytest.mark.parametrize(
        "title",
        ["abc", "  abc  ", "Buy milk", "x" * TITLE_MAX_LENGTH],
    )
    def test_valid_titles(self, title: str) -> None:
        """Titles of 3 to 100 characters are accepted."""
        validate_task(Task(title=title))

    def test_description_at_limit(self) -> None:
        """A description of exactly 500 characters is accepted."""
        validate_task(Task(title="Buy milk", description="d" * DESCRIPTION_MAX_LENGTH))

    def test_missing_task(self) -> None:
        """An absent task is rejected."""
        with pytest.raises(ValidationError, match="must not be null"):
            validate_task(None)

    @pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
    def test_blank_title(self, title) -> None:
        """Absent or whitespace-only titles are rejected."""
        with pytest.raises(ValidationError, match="title is required"):
            validate_task(Task(title=title))

    @pytest.mark.parametrize("title", ["ab", " ab ", "a"])
    def test_short_title(self, title: str) -> None:
        """Titles shorter than 3 characters once trimmed are rejected."""
        with pytest.raises(ValidationError, match="at least 3"):
            validate_task(Task(title=title))

    def test_long_title(self) -> None:
        """Titles longer than 100 characters are rejected."""
        with pytest.raises(ValidationError, match="exceed 100"):
            validate_task(Task(title="x" * (TITLE_MAX_LENGTH + 1)))

    def test_long_title_counts_whitespace(self) -> None:
        """The upper bound applies to the title as given, not trimmed."""
        with pytest.raises(ValidationError, match="exceed 100"):
            validate_task(Task(title=" " + "x" * TITLE_MAX_LENGTH))

    def test_long_description(self) -> None:
        """Descriptions longer than 500 characters are rejected."""
        with pytest.raises(ValidationError, match="description"):
            validate_task(
                Task(title="Buy milk", description="d" * (DESCRIPTION_MAX_LENGTH + 1))
            )


class TestValidateTaskId:
    """Tests for validate_task_id."""

    def test_positive_id(self) -> None:
        validate_task_id(1)

    def test_missing_id(self) -> None:
        with pytest.raises(ValidationError, match="must not be null"):
            validate_task_id(None)

    def test_largest_id(self) -> None:
        validate_task_id(TASK_ID_MAX)

    def test_id_beyond_column_range(self) -> None:
        """Ids too large for a 64-bit INTEGER column are rejected."""
        with pytest.raises(ValidationError, match="must not exceed"):
            validate_task_id(TASK_ID_MAX + 1)

    @pytest.mark.parametrize("task_id", [0, -1, -100])
    def test_non_positive_id(self, task_id: int) -> None:
        with pytest.raises(ValidationError, match="positive"):
            validate_task_id(task_id)


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_error_message(self) -> None:
        """NotFoundError names the resource and its id."""
        error = NotFoundError("Task", 7)
        assert error.message == "Task with id 7 not found"
        assert error.resource_id == 7

    def test_validation_error_reason(self) -> None:
        error = ValidationError("bad title")
        assert error.reason == "bad title"
        assert str(error) == "bad title"

    def test_storage_error_operation(self) -> None:
        error = StorageError("save")
        assert error.operation == "save"
        assert "save" in error.message

    def test_all_errors_share_base(self) -> None:
        """Every domain error derives from TaskDomainError."""
        for error in (ValidationError("x"), NotFoundError("Task", 1), StorageError("x")):
            assert isinstance(error, TaskDomainError)
