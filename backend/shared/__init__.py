"""
Shared infrastructure for Taskboard backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes and error kinds
- logging_setup: Root logger configuration

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ErrorKind,
    TaskboardError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    UniqueViolationError,
    ExternalServiceError,
    StoreError,
)
from .models import ApiModel, AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ErrorKind",
    "TaskboardError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "UniqueViolationError",
    "ExternalServiceError",
    "StoreError",
    "ApiModel",
    "AuthenticatedUser",
]
