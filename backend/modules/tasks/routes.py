"""
Task API endpoints.

Provides REST endpoints for task CRUD, filtering and statistics.
Every endpoint requires a session and is scoped to the caller's own tasks.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_task_service
from shared.models import AuthenticatedUser

from .interfaces import ITaskService
from .models import (
    CreateTaskRequest,
    Task,
    TaskFilters,
    TaskStatistics,
    UpdateTaskRequest,
)

router = APIRouter()


@router.post("", response_model=Task, status_code=201)
async def create_task(
    request: CreateTaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Create a new task.

    Returns 409 if the caller already has a task with the same title
    and due date.
    """
    return await service.create(user.id, request)


@router.get("", response_model=list[Task])
async def list_tasks(
    is_done: Optional[bool] = Query(default=None, alias="isDone", description="Filter by completion status"),
    due_date_from: Optional[date] = Query(default=None, alias="dueDateFrom", description="Due on or after (YYYY-MM-DD)"),
    due_date_to: Optional[date] = Query(default=None, alias="dueDateTo", description="Due on or before (YYYY-MM-DD)"),
    search: Optional[str] = Query(default=None, description="Search in title and description"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> list[Task]:
    """
    List the current user's tasks.

    Incomplete tasks come first, then by due date, then newest first.
    """
    filters = TaskFilters(
        is_done=is_done,
        due_date_from=due_date_from,
        due_date_to=due_date_to,
        search=search,
    )
    return await service.find_all_by_user(user.id, filters)


@router.get("/statistics", response_model=TaskStatistics)
async def get_statistics(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> TaskStatistics:
    """Get task statistics for the current user."""
    return await service.get_statistics(user.id)


@router.get("/upcoming", response_model=list[Task])
async def get_upcoming(
    days: int = Query(default=7, description="Look-ahead window in days"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> list[Task]:
    """Get incomplete tasks due within the next `days` days (default 7)."""
    return await service.get_upcoming_tasks(user.id, days)


@router.get("/overdue", response_model=list[Task])
async def get_overdue(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> list[Task]:
    """Get incomplete tasks whose due date has passed."""
    return await service.get_overdue_tasks(user.id)


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """Get a task by ID."""
    return await service.find_one(task_id, user.id)


@router.patch("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """Update a task. Omitted fields are left unchanged."""
    return await service.update(task_id, user.id, request)


@router.patch("/{task_id}/toggle", response_model=Task)
async def toggle_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """Toggle a task's completion status."""
    return await service.toggle_complete(task_id, user.id)


@router.delete("/{task_id}", response_model=Task)
async def delete_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """Delete a task and return it as it was."""
    return await service.remove(task_id, user.id)
