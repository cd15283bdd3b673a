"""
Tasks service implementation.

Ownership-scoped task operations: CRUD, filtered listings, statistics,
and upcoming/overdue derivations.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from shared.exceptions import UniqueViolationError

from .dates import first_due_date_not_before, upcoming_window
from .exceptions import TaskAccessDeniedError, TaskConflictError, TaskNotFoundError
from .interfaces import ITaskRepository, ITaskService
from .models import (
    CreateTaskRequest,
    Task,
    TaskFilters,
    TaskOrder,
    TaskQuery,
    TaskStatistics,
    UpdateTaskRequest,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskService(ITaskService):
    """
    Task service.

    Args:
        repository: Task repository (no authorization of its own)
        now: Clock returning the current UTC time
    """

    def __init__(
        self,
        repository: ITaskRepository,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self._tasks = repository
        self._now = now or _utcnow

    async def create(self, owner_id: str, request: CreateTaskRequest) -> Task:
        """Create a task for the owner."""
        if self._tasks.find_duplicate(owner_id, request.title, request.due_date):
            raise TaskConflictError()

        data = {
            "title": request.title,
            "description": request.description,
            "is_done": request.is_done,
            "due_date": request.due_date,
            "owner_id": owner_id,
        }

        try:
            task = self._tasks.create(data)
        except UniqueViolationError as e:
            raise TaskConflictError() from e

        logger.debug(f"Created task {task.id} for user {owner_id}")
        return task

    async def find_all_by_user(
        self,
        owner_id: str,
        filters: Optional[TaskFilters] = None,
    ) -> list[Task]:
        """List the owner's tasks, optionally filtered."""
        filters = filters or TaskFilters()
        query = TaskQuery(
            owner_id=owner_id,
            is_done=filters.is_done,
            due_on_or_after=filters.due_date_from,
            due_on_or_before=filters.due_date_to,
            search=filters.search or None,
        )
        return self._tasks.find(query)

    async def find_one(self, task_id: str, owner_id: Optional[str] = None) -> Task:
        """Get a task, checking ownership when owner_id is given."""
        task = self._tasks.get_by_id(task_id)

        if task is None:
            raise TaskNotFoundError(task_id)

        if owner_id is not None and task.owner_id != owner_id:
            raise TaskAccessDeniedError(task_id, owner_id)

        return task

    async def update(
        self,
        task_id: str,
        owner_id: str,
        request: UpdateTaskRequest,
    ) -> Task:
        """Apply a partial update to one of the owner's tasks."""
        task = await self.find_one(task_id, owner_id)

        changes: dict[str, Any] = {}
        for field in request.model_fields_set:
            value = getattr(request, field)
            # Only the nullable columns may be cleared with an explicit null
            if value is None and field not in ("description", "due_date"):
                continue
            changes[field] = value

        if not changes:
            return task

        title = changes.get("title", task.title)
        due_date = changes["due_date"] if "due_date" in changes else task.due_date
        if (title, due_date) != (task.title, task.due_date):
            if self._tasks.find_duplicate(owner_id, title, due_date, exclude_task_id=task_id):
                raise TaskConflictError()

        try:
            updated = self._tasks.update(task_id, changes)
        except UniqueViolationError as e:
            raise TaskConflictError() from e

        if updated is None:
            # Deleted between the lookup and the write
            raise TaskNotFoundError(task_id)
        return updated

    async def toggle_complete(self, task_id: str, owner_id: str) -> Task:
        """Flip the completion flag of one of the owner's tasks."""
        task = await self.find_one(task_id, owner_id)

        updated = self._tasks.update(task_id, {"is_done": not task.is_done})
        if updated is None:
            raise TaskNotFoundError(task_id)
        return updated

    async def remove(self, task_id: str, owner_id: str) -> Task:
        """Delete one of the owner's tasks and return it."""
        task = await self.find_one(task_id, owner_id)

        self._tasks.delete(task_id)
        logger.debug(f"Deleted task {task_id} for user {owner_id}")
        return task

    async def get_statistics(self, owner_id: str) -> TaskStatistics:
        """Aggregate counts over the owner's tasks."""
        total = self._tasks.count(TaskQuery(owner_id=owner_id))
        completed = self._tasks.count(TaskQuery(owner_id=owner_id, is_done=True))
        pending = self._tasks.count(TaskQuery(owner_id=owner_id, is_done=False))
        overdue = self._tasks.count(self._overdue_query(owner_id))

        return TaskStatistics(
            total=total,
            completed=completed,
            pending=pending,
            overdue=overdue,
            completion_rate=(completed / total) * 100 if total > 0 else 0,
        )

    async def get_upcoming_tasks(self, owner_id: str, days: int = 7) -> list[Task]:
        """Incomplete tasks due in [now, now + days], soonest first."""
        start, end = upcoming_window(self._now(), days)
        return self._tasks.find(
            TaskQuery(
                owner_id=owner_id,
                is_done=False,
                due_on_or_after=start,
                due_on_or_before=end,
                order=TaskOrder.DUE_DATE,
            )
        )

    async def get_overdue_tasks(self, owner_id: str) -> list[Task]:
        """Incomplete tasks due before now, oldest first."""
        return self._tasks.find(self._overdue_query(owner_id))

    def _overdue_query(self, owner_id: str) -> TaskQuery:
        return TaskQuery(
            owner_id=owner_id,
            is_done=False,
            due_before=first_due_date_not_before(self._now()),
            order=TaskOrder.DUE_DATE,
        )
