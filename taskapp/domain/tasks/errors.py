"""
Domain-specific errors for the tasks bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class TaskDomainError(Exception):
    """Base error for all tasks domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(TaskDomainError):
    """Raised when a task or task id fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NotFoundError(TaskDomainError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, resource: str, resource_id: int) -> None:
        super().__init__(f"{resource} with id {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class StorageError(TaskDomainError):
    """Raised when the backing store fails.

    The underlying driver error is chained as ``__cause__`` and is
    only ever logged, never returned to a client.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"Storage failure during {operation}")
        self.operation = operation
