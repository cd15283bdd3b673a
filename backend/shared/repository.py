"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating store failures into the
application's error kinds.
"""

import logging
from typing import Any, TypeVar, Generic

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StoreError, UniqueViolationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def quote_filter_value(value: str) -> str:
    """
    Quote a value for use inside a PostgREST logic filter (or_/and_).

    Commas, dots and parentheses are reserved in that syntax, so values are
    wrapped in double quotes with backslashes and quotes escaped.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Error translation via self._execute()
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class TaskRepository(BaseRepository[Task]):
            def get_by_id(self, task_id: str) -> Optional[Task]:
                result = self._execute(
                    self._db.table("tasks").select("*").eq("id", task_id)
                )
                if not result.data:
                    return None
                return self._map_to_task(result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self) -> Any:
        """Start a query on this repository's table."""
        return self._db.table(self.table_name)

    def _execute(self, query: Any) -> Any:
        """
        Execute a PostgREST query, translating failures.

        Raises:
            UniqueViolationError: If the store rejected a duplicate row
            StoreError: For any other database failure
        """
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UniqueViolationError(self.table_name, e.details) from e
            logger.exception(f"Database error on table '{self.table_name}': {e.message}")
            raise StoreError(
                "An unexpected error occurred",
                details={"table": self.table_name},
            ) from e
