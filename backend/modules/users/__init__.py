"""
Users module.

Stores user accounts and manages the caller's own profile.

Public API:
- IUserService: Interface for profile operations
- User: Outward user representation (never includes the password digest)
- UserRecord: Stored user row
- User exceptions: ProfileNotFoundError, EmailAlreadyExistsError, etc.
"""

from .interfaces import IUserService
from .models import User, UserRecord, UpdateUserRequest, validate_password_strength
from .exceptions import (
    ProfileNotFoundError,
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserRecord",
    "UpdateUserRequest",
    "validate_password_strength",
    # Exceptions
    "ProfileNotFoundError",
    "EmailAlreadyExistsError",
    "UsernameAlreadyExistsError",
]
