"""
Tasks module interfaces.

The API layer depends on ITaskService for all task operations; the
service depends on ITaskRepository for persistence.
"""

from datetime import date
from typing import Any, Protocol, Optional, runtime_checkable

from .models import (
    CreateTaskRequest,
    Task,
    TaskFilters,
    TaskQuery,
    TaskStatistics,
    UpdateTaskRequest,
)


@runtime_checkable
class ITaskRepository(Protocol):
    """
    Record access for the `tasks` table.

    Implementations enforce (owner_id, title, due_date) uniqueness and
    raise UniqueViolationError when it would be broken. They do NOT
    perform authorization checks.
    """

    def create(self, data: dict[str, Any]) -> Task:
        """Insert a task and return it with its owner projection."""
        ...

    def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get a task with its owner projection, or None."""
        ...

    def find(self, query: TaskQuery) -> list[Task]:
        """Return tasks matching the predicate, in the requested order."""
        ...

    def count(self, query: TaskQuery) -> int:
        """Count tasks matching the predicate."""
        ...

    def find_duplicate(
        self,
        owner_id: str,
        title: str,
        due_date: Optional[date],
        exclude_task_id: Optional[str] = None,
    ) -> Optional[Task]:
        """Find a task of the owner with exactly this title and due date."""
        ...

    def update(self, task_id: str, data: dict[str, Any]) -> Optional[Task]:
        """Update a task and return it, or None if it no longer exists."""
        ...

    def delete(self, task_id: str) -> None:
        """Delete a task."""
        ...


@runtime_checkable
class ITaskService(Protocol):
    """
    Interface for task operations.

    Every operation except find_one without an owner is scoped to the
    owner it is given.
    """

    async def create(self, owner_id: str, request: CreateTaskRequest) -> Task:
        """
        Create a task for the owner.

        Raises:
            TaskConflictError: If the owner has a task with the same title and due date
        """
        ...

    async def find_all_by_user(
        self,
        owner_id: str,
        filters: Optional[TaskFilters] = None,
    ) -> list[Task]:
        """
        List the owner's tasks.

        Ordered incomplete first, then by due date ascending, then by
        creation time descending.
        """
        ...

    async def find_one(self, task_id: str, owner_id: Optional[str] = None) -> Task:
        """
        Get a task by ID.

        Args:
            task_id: Task UUID
            owner_id: Caller ID. When omitted no ownership check happens;
                only trusted internal callers may omit it.

        Raises:
            TaskNotFoundError: If no such task exists
            TaskAccessDeniedError: If owner_id is given and doesn't own the task
        """
        ...

    async def update(
        self,
        task_id: str,
        owner_id: str,
        request: UpdateTaskRequest,
    ) -> Task:
        """
        Apply a partial update.

        Raises:
            TaskNotFoundError: If no such task exists
            TaskAccessDeniedError: If the caller doesn't own the task
            TaskConflictError: If the result would duplicate another task
        """
        ...

    async def toggle_complete(self, task_id: str, owner_id: str) -> Task:
        """Flip the completion flag."""
        ...

    async def remove(self, task_id: str, owner_id: str) -> Task:
        """Delete a task and return it as it was before deletion."""
        ...

    async def get_statistics(self, owner_id: str) -> TaskStatistics:
        """Count total, completed, pending and overdue tasks."""
        ...

    async def get_upcoming_tasks(self, owner_id: str, days: int = 7) -> list[Task]:
        """Incomplete tasks due within the next `days` days, soonest first."""
        ...

    async def get_overdue_tasks(self, owner_id: str) -> list[Task]:
        """Incomplete tasks whose due date has passed, oldest first."""
        ...
