"""
Users service implementation.

Profile management for the authenticated caller, plus the uniqueness
checks shared with registration.
"""

import asyncio
import logging
from typing import Any, Optional

from shared.exceptions import ConflictError, UniqueViolationError

from .exceptions import (
    EmailAlreadyExistsError,
    ProfileNotFoundError,
    UsernameAlreadyExistsError,
)
from .interfaces import IUserService
from .models import UpdateUserRequest, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def ensure_identity_available(
    repository: UserRepository,
    email: Optional[str],
    username: Optional[str],
    exclude_user_id: Optional[str] = None,
) -> None:
    """
    Fail if another user already holds the email or username.

    The email check takes priority when both collide.

    Raises:
        EmailAlreadyExistsError: If the email is taken
        UsernameAlreadyExistsError: If the username is taken
    """
    existing = [
        u for u in repository.find_by_email_or_username(email, username)
        if u.id != exclude_user_id
    ]
    if any(u.email == email for u in existing):
        raise EmailAlreadyExistsError()
    if any(u.username == username for u in existing):
        raise UsernameAlreadyExistsError()


def conflict_from_violation(error: UniqueViolationError) -> ConflictError:
    """Map a store-level unique violation on `users` to the matching conflict."""
    constraint = str(error.details.get("constraint") or "")
    if "username" in constraint:
        return UsernameAlreadyExistsError()
    return EmailAlreadyExistsError()


class UserService(IUserService):
    """
    User profile service.

    Args:
        repository: User repository
        password_hasher: IPasswordHasher used when the password changes
    """

    def __init__(self, repository: UserRepository, password_hasher: Any):
        self._users = repository
        self._hasher = password_hasher

    async def get_profile(self, user_id: str) -> User:
        record = self._users.get_by_id(user_id)
        if record is None:
            raise ProfileNotFoundError(user_id)
        return record.to_public()

    async def update_profile(self, user_id: str, request: UpdateUserRequest) -> User:
        current = self._users.get_by_id(user_id)
        if current is None:
            raise ProfileNotFoundError(user_id)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        password = changes.pop("password", None)

        new_email = changes.get("email")
        new_username = changes.get("username")
        ensure_identity_available(
            self._users,
            new_email if new_email != current.email else None,
            new_username if new_username != current.username else None,
            exclude_user_id=user_id,
        )

        if password is not None:
            changes["password_hash"] = await asyncio.to_thread(self._hasher.hash, password)

        if not changes:
            return current.to_public()

        try:
            updated = self._users.update(user_id, changes)
        except UniqueViolationError as e:
            raise conflict_from_violation(e) from e

        if updated is None:
            raise ProfileNotFoundError(user_id)

        logger.info(f"Updated profile for user {user_id}: {sorted(changes)}")
        return updated.to_public()

    async def delete_account(self, user_id: str) -> User:
        deleted = self._users.delete(user_id)
        if deleted is None:
            raise ProfileNotFoundError(user_id)

        logger.info(f"Deleted account for user {user_id}")
        return deleted.to_public()
