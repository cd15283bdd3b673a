"""
Tasks module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, task_id: str):
        super().__init__(
            f"Task with ID {task_id} not found",
            code="TASK_NOT_FOUND",
            details={"task_id": task_id},
        )


class TaskAccessDeniedError(AuthorizationError):
    """Raised when the caller doesn't own the task."""

    def __init__(self, task_id: str, user_id: str):
        super().__init__(
            "You do not have access to this task",
            code="TASK_ACCESS_DENIED",
            details={"task_id": task_id, "user_id": user_id},
        )


class TaskConflictError(ConflictError):
    """Raised when the owner already has a task with this title and due date."""

    def __init__(self) -> None:
        super().__init__(
            "A task with this title and due date already exists",
            code="TASK_CONFLICT",
        )
