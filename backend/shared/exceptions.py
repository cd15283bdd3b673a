"""
Base exception classes for the Taskboard backend.

Each module should define its own exceptions that inherit from these bases.
Every base maps to exactly one ErrorKind, and the API layer translates
kinds (not individual classes) into HTTP responses.
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """The fixed set of failure kinds an operation can report."""

    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


class TaskboardError(Exception):
    """
    Base exception for all Taskboard errors.

    All custom exceptions should inherit from one of the kind-specific
    subclasses below rather than from this class directly.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(TaskboardError):
    """Resource not found."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(TaskboardError):
    """Input validation failed."""

    kind = ErrorKind.VALIDATION_FAILED


class AuthenticationError(TaskboardError):
    """Authentication failed (invalid or missing credentials)."""

    kind = ErrorKind.UNAUTHORIZED


class AuthorizationError(TaskboardError):
    """Authorization failed (caller does not own the resource)."""

    kind = ErrorKind.FORBIDDEN


class ConflictError(TaskboardError):
    """A uniqueness constraint would be violated."""

    kind = ErrorKind.CONFLICT


class UniqueViolationError(ConflictError):
    """Raised by repositories when the store rejects a duplicate row."""

    def __init__(self, table: str, constraint: Optional[str] = None):
        super().__init__(
            f"Duplicate record in {table}",
            code="UNIQUE_VIOLATION",
            details={"table": table, "constraint": constraint},
        )


class ExternalServiceError(TaskboardError):
    """Error communicating with an external service."""

    kind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """Any database failure that is not a uniqueness violation."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, service="database", code="STORE_ERROR", details=details)
