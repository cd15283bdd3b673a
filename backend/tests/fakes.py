"""
In-memory stand-ins for the Supabase repositories and the password hasher.

They honour the same contracts as the real implementations (uniqueness,
owner projection, TaskQuery semantics and ordering) so service tests can
run without a database.
"""

import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from shared.exceptions import UniqueViolationError
from modules.tasks.models import Task, TaskOrder, TaskOwner, TaskQuery
from modules.tasks.repository import is_uuid
from modules.users.models import UserRecord


BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


class _Clock:
    """Hands out strictly increasing timestamps."""

    def __init__(self) -> None:
        self._ticks = 0

    def __call__(self) -> datetime:
        self._ticks += 1
        return BASE_TIME + timedelta(seconds=self._ticks)


class FakePasswordHasher:
    """Reversible 'hash' so tests stay fast."""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class InMemoryUserRepository:
    """Dict-backed replacement for UserRepository."""

    table_name = "users"

    def __init__(self) -> None:
        self.rows: dict[str, UserRecord] = {}
        self._clock = _Clock()

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.rows.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.rows.values() if u.email == email), None)

    def find_by_email_or_username(
        self,
        email: Optional[str],
        username: Optional[str],
    ) -> list[UserRecord]:
        return [
            u for u in self.rows.values()
            if (email is not None and u.email == email)
            or (username is not None and u.username == username)
        ]

    def create(self, data: dict[str, Any]) -> UserRecord:
        self._check_unique(data)
        now = self._clock()
        record = UserRecord(id=str(uuid.uuid4()), created_at=now, updated_at=now, **data)
        self.rows[record.id] = record
        return record

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        current = self.rows.get(user_id)
        if current is None:
            return None
        self._check_unique(data, exclude_user_id=user_id)
        updated = current.model_copy(update={**data, "updated_at": self._clock()})
        self.rows[user_id] = updated
        return updated

    def delete(self, user_id: str) -> Optional[UserRecord]:
        return self.rows.pop(user_id, None)

    def _check_unique(self, data: dict[str, Any], exclude_user_id: Optional[str] = None) -> None:
        for other in self.rows.values():
            if other.id == exclude_user_id:
                continue
            if "email" in data and other.email == data["email"]:
                raise UniqueViolationError("users", "users_email_key")
            if "username" in data and other.username == data["username"]:
                raise UniqueViolationError("users", "users_username_key")


class InMemoryTaskRepository:
    """
    Dict-backed replacement for TaskRepository.

    Owner projections are resolved through the given user repository.
    """

    table_name = "tasks"

    def __init__(self, users: Optional[InMemoryUserRepository] = None) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self._users = users
        self._clock = _Clock()

    def create(self, data: dict[str, Any]) -> Task:
        row = {
            "description": None,
            "is_done": False,
            "due_date": None,
            **data,
        }
        self._check_unique(row)
        now = self._clock()
        row.update(id=str(uuid.uuid4()), created_at=now, updated_at=now)
        self.rows[row["id"]] = row
        return self._to_task(row)

    def get_by_id(self, task_id: str) -> Optional[Task]:
        if not is_uuid(task_id):
            return None
        row = self.rows.get(task_id)
        return self._to_task(row) if row else None

    def update(self, task_id: str, data: dict[str, Any]) -> Optional[Task]:
        current = self.rows.get(task_id)
        if current is None:
            return None
        candidate = {**current, **data}
        self._check_unique(candidate)
        candidate["updated_at"] = self._clock()
        self.rows[task_id] = candidate
        return self._to_task(candidate)

    def delete(self, task_id: str) -> None:
        self.rows.pop(task_id, None)

    def find(self, query: TaskQuery) -> list[Task]:
        rows = [row for row in self.rows.values() if self._matches(row, query)]

        if query.order == TaskOrder.DUE_DATE:
            rows.sort(key=self._due_date_key)
        else:
            rows.sort(key=lambda row: row["created_at"], reverse=True)
            rows.sort(key=lambda row: (row["is_done"], *self._due_date_key(row)))

        return [self._to_task(row) for row in rows]

    def count(self, query: TaskQuery) -> int:
        return sum(1 for row in self.rows.values() if self._matches(row, query))

    def find_duplicate(
        self,
        owner_id: str,
        title: str,
        due_date: Optional[date],
        exclude_task_id: Optional[str] = None,
    ) -> Optional[Task]:
        for row in self.rows.values():
            if row["id"] == exclude_task_id:
                continue
            if (row["owner_id"], row["title"], row["due_date"]) == (owner_id, title, due_date):
                return self._to_task(row)
        return None

    @staticmethod
    def _due_date_key(row: dict[str, Any]) -> tuple[bool, date]:
        # Nulls sort last, as in PostgreSQL
        return (row["due_date"] is None, row["due_date"] or date.min)

    @staticmethod
    def _matches(row: dict[str, Any], query: TaskQuery) -> bool:
        due = row["due_date"]
        if row["owner_id"] != query.owner_id:
            return False
        if query.is_done is not None and row["is_done"] != query.is_done:
            return False
        if query.due_on_or_after is not None and (due is None or due < query.due_on_or_after):
            return False
        if query.due_on_or_before is not None and (due is None or due > query.due_on_or_before):
            return False
        if query.due_before is not None and (due is None or due >= query.due_before):
            return False
        if query.search:
            haystacks = (row["title"], row["description"] or "")
            if not any(query.search in text for text in haystacks):
                return False
        return True

    def _check_unique(self, candidate: dict[str, Any]) -> None:
        key = (candidate["owner_id"], candidate["title"], candidate["due_date"])
        for row in self.rows.values():
            if row.get("id") == candidate.get("id"):
                continue
            if (row["owner_id"], row["title"], row["due_date"]) == key:
                raise UniqueViolationError("tasks", "tasks_owner_id_title_due_date_key")

    def _to_task(self, row: dict[str, Any]) -> Task:
        owner = None
        if self._users is not None:
            user = self._users.get_by_id(row["owner_id"])
            if user is not None:
                owner = TaskOwner(
                    id=user.id,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    username=user.username,
                    email=user.email,
                )
        return Task(owner=owner, **row)
