"""
Tasks module data models.

These models define the task records, request bodies, the typed query
predicate handed to the repository, and statistics.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, EmailStr, Field

from shared.models import ApiModel
from .dates import parse_due_date


DueDate = Annotated[Optional[date], BeforeValidator(parse_due_date)]

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 40
DESCRIPTION_MAX_LENGTH = 300


class TaskOwner(ApiModel):
    """Minimal projection of the owning user (never the password digest)."""

    id: str
    first_name: str
    last_name: str
    username: str
    email: EmailStr


class Task(ApiModel):
    """A task with its owner projection."""

    id: str = Field(..., description="Task ID (UUID)")
    title: str = Field(..., description="Title of the task")
    description: Optional[str] = Field(None, description="Detailed description")
    is_done: bool = Field(default=False, description="Completion status")
    due_date: Optional[date] = Field(None, description="Due date (no time component)")
    owner_id: str = Field(..., description="ID of the owning user")
    created_at: datetime
    updated_at: datetime
    owner: Optional[TaskOwner] = None


class CreateTaskRequest(ApiModel):
    """Request to create a task."""

    title: str = Field(
        ...,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="Title of the task",
        examples=["Complete project documentation"],
    )
    description: Optional[str] = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Detailed description of the task",
    )
    is_done: bool = Field(default=False, description="Completion status")
    due_date: DueDate = Field(
        None,
        description="Due date (YYYY-MM-DD)",
        examples=["2026-02-20"],
    )


class UpdateTaskRequest(ApiModel):
    """
    Partial task update.

    Omitted fields keep their current value. An explicit null or empty
    `dueDate` clears the due date.
    """

    title: Optional[str] = Field(
        None,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
    )
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    is_done: Optional[bool] = None
    due_date: DueDate = None


class TaskFilters(ApiModel):
    """Caller-facing listing filters. All are optional and combine with AND."""

    is_done: Optional[bool] = Field(None, description="Filter by completion status")
    due_date_from: Optional[date] = Field(None, description="Due on or after this date")
    due_date_to: Optional[date] = Field(None, description="Due on or before this date")
    search: Optional[str] = Field(None, description="Search in title and description")


class TaskOrder(str, Enum):
    """Result ordering understood by the repository."""

    # is_done asc, due_date asc, created_at desc
    DEFAULT = "default"
    DUE_DATE = "due_date"


class TaskQuery(BaseModel):
    """
    Typed query predicate for the task repository.

    Every set field narrows the result; all of them combine with AND.
    The repository translates this into its native query form.
    """

    model_config = {"frozen": True}

    owner_id: str
    is_done: Optional[bool] = None
    due_on_or_after: Optional[date] = None
    due_on_or_before: Optional[date] = None
    due_before: Optional[date] = None
    search: Optional[str] = None
    order: TaskOrder = TaskOrder.DEFAULT


class TaskStatistics(ApiModel):
    """Aggregate counts over the caller's tasks."""

    total: int = Field(..., description="Total number of tasks")
    completed: int = Field(..., description="Number of completed tasks")
    pending: int = Field(..., description="Number of pending tasks")
    overdue: int = Field(..., description="Number of overdue tasks")
    completion_rate: float = Field(..., description="Completion rate as a percentage")
