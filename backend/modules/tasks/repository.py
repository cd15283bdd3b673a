"""
Task repository for database access.

Encapsulates all Supabase queries and data mapping for the `tasks` table,
and translates TaskQuery predicates into PostgREST filters.
"""

import uuid
from datetime import date, datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository, quote_filter_value
from .models import Task, TaskOrder, TaskOwner, TaskQuery

# Tasks are always read together with the owner projection
TASK_SELECT = "*, owner:users(id, first_name, last_name, username, email)"


def escape_like(term: str) -> str:
    """
    Escape LIKE wildcards so the term matches literally.

    PostgREST rewrites `*` to `%` before the pattern reaches the database
    and offers no escape for it, so a `*` in a search term still acts as
    a wildcard.
    """
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def is_uuid(value: str) -> bool:
    """Whether the value parses as a UUID (the type of `tasks.id`)."""
    try:
        uuid.UUID(value)
    except (TypeError, ValueError):
        return False
    return True


class TaskRepository(BaseRepository[Task]):
    """
    Repository for task data access.

    The `tasks` table has a unique index on (owner_id, title, due_date).

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    table_name = "tasks"

    # -------------------------------------------------------------------------
    # CRUD operations
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> Task:
        """
        Insert a task row.

        Args:
            data: Column values (title, description, is_done, due_date, owner_id)

        Returns:
            Created task with generated ID, timestamps and owner projection.
        """
        result = self._execute(self._table().insert(self._serialize(data)))
        task_id = str(result.data[0]["id"])
        return self.get_by_id(task_id) or self._map_to_task(result.data[0])

    def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get a task by ID, or None. IDs that are not UUIDs match nothing."""
        if not is_uuid(task_id):
            return None

        result = self._execute(
            self._table().select(TASK_SELECT).eq("id", task_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_task(result.data[0])

    def update(self, task_id: str, data: dict[str, Any]) -> Optional[Task]:
        """Update a task row. Returns None if no row matched."""
        data = {
            **self._serialize(data),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._execute(self._table().update(data).eq("id", task_id))
        if not result.data:
            return None
        return self.get_by_id(task_id)

    def delete(self, task_id: str) -> None:
        """Delete a task row."""
        self._execute(self._table().delete().eq("id", task_id))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find(self, query: TaskQuery) -> list[Task]:
        """Return tasks matching the predicate, in the requested order."""
        q = self._apply_filters(self._table().select(TASK_SELECT), query)

        if query.order == TaskOrder.DUE_DATE:
            q = q.order("due_date")
        else:
            q = q.order("is_done").order("due_date").order("created_at", desc=True)

        result = self._execute(q)
        return [self._map_to_task(row) for row in result.data]

    def count(self, query: TaskQuery) -> int:
        """Count tasks matching the predicate."""
        q = self._apply_filters(self._table().select("id", count="exact"), query)
        result = self._execute(q.limit(1))
        return result.count or 0

    def find_duplicate(
        self,
        owner_id: str,
        title: str,
        due_date: Optional[date],
        exclude_task_id: Optional[str] = None,
    ) -> Optional[Task]:
        """Find a task of the owner with exactly this title and due date."""
        q = self._table().select(TASK_SELECT).eq("owner_id", owner_id).eq("title", title)
        if due_date is None:
            q = q.is_("due_date", "null")
        else:
            q = q.eq("due_date", due_date.isoformat())
        if exclude_task_id is not None:
            q = q.neq("id", exclude_task_id)

        result = self._execute(q.limit(1))
        if not result.data:
            return None
        return self._map_to_task(result.data[0])

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _apply_filters(self, q: Any, query: TaskQuery) -> Any:
        """Translate a TaskQuery into PostgREST filters."""
        q = q.eq("owner_id", query.owner_id)

        if query.is_done is not None:
            q = q.eq("is_done", query.is_done)
        if query.due_on_or_after is not None:
            q = q.gte("due_date", query.due_on_or_after.isoformat())
        if query.due_on_or_before is not None:
            q = q.lte("due_date", query.due_on_or_before.isoformat())
        if query.due_before is not None:
            q = q.lt("due_date", query.due_before.isoformat())
        if query.search:
            pattern = quote_filter_value(f"*{escape_like(query.search)}*")
            q = q.or_(f"title.like.{pattern},description.like.{pattern}")

        return q

    def _serialize(self, data: dict[str, Any]) -> dict[str, Any]:
        """Convert Python values to their JSON column form."""
        return {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in data.items()
        }

    def _map_to_task(self, data: dict[str, Any]) -> Task:
        """Map database row to Task model."""
        owner_data = data.get("owner")
        owner = TaskOwner(**owner_data) if owner_data else None

        return Task(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description"),
            is_done=data.get("is_done", False),
            due_date=data.get("due_date"),
            owner_id=str(data["owner_id"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            owner=owner,
        )
