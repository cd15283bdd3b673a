"""
Tasks module.

Ownership-scoped task management.

Public API:
- ITaskService: Interface for task operations
- ITaskRepository: Interface for task persistence
- Task: A task with its owner projection
- CreateTaskRequest / UpdateTaskRequest / TaskFilters: Inputs
- TaskQuery: Typed predicate handed to the repository
- TaskStatistics: Aggregate counts
"""

from .interfaces import ITaskService, ITaskRepository
from .models import (
    Task,
    TaskOwner,
    CreateTaskRequest,
    UpdateTaskRequest,
    TaskFilters,
    TaskQuery,
    TaskOrder,
    TaskStatistics,
)
from .exceptions import (
    TaskNotFoundError,
    TaskAccessDeniedError,
    TaskConflictError,
)

__all__ = [
    # Interfaces
    "ITaskService",
    "ITaskRepository",
    # Models
    "Task",
    "TaskOwner",
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "TaskFilters",
    "TaskQuery",
    "TaskOrder",
    "TaskStatistics",
    # Exceptions
    "TaskNotFoundError",
    "TaskAccessDeniedError",
    "TaskConflictError",
]
