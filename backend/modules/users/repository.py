"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the `users` table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository, quote_filter_value
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    The `users` table enforces uniqueness on email and on username.
    Inserts and updates that break either raise UniqueViolationError.
    """

    table_name = "users"

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID, or None."""
        result = self._execute(self._table().select("*").eq("id", user_id).limit(1))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by exact email, or None."""
        result = self._execute(self._table().select("*").eq("email", email).limit(1))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def find_by_email_or_username(
        self,
        email: Optional[str],
        username: Optional[str],
    ) -> list[UserRecord]:
        """
        Find every user whose email or username matches.

        Args:
            email: Email to match (skipped when None)
            username: Username to match (skipped when None)

        Returns:
            Matching users (at most one per unique column).
        """
        conditions = []
        if email is not None:
            conditions.append(f"email.eq.{quote_filter_value(email)}")
        if username is not None:
            conditions.append(f"username.eq.{quote_filter_value(username)}")
        if not conditions:
            return []

        result = self._execute(self._table().select("*").or_(",".join(conditions)))
        return [self._map_to_user(row) for row in result.data]

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a user row.

        Args:
            data: Column values (first_name, last_name, email, username, password_hash)

        Returns:
            Created user with generated ID and timestamps.
        """
        result = self._execute(self._table().insert(data))
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        """Update a user row. Returns None if no row matched."""
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._execute(self._table().update(data).eq("id", user_id))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: str) -> Optional[UserRecord]:
        """
        Delete a user row.

        Note: The user's tasks are deleted via CASCADE.

        Returns:
            The deleted row, or None if no row matched.
        """
        result = self._execute(self._table().delete().eq("id", user_id))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            username=data["username"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
