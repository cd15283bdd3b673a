"""
Users module interface.
"""

from typing import Protocol, runtime_checkable

from .models import UpdateUserRequest, User


@runtime_checkable
class IUserService(Protocol):
    """Profile operations on the caller's own account."""

    async def get_profile(self, user_id: str) -> User:
        """
        Get the user's profile.

        Raises:
            ProfileNotFoundError: If the user doesn't exist
        """
        ...

    async def update_profile(self, user_id: str, request: UpdateUserRequest) -> User:
        """
        Apply a partial profile update.

        Omitted fields keep their value. A new password is re-hashed.

        Raises:
            ProfileNotFoundError: If the user doesn't exist
            EmailAlreadyExistsError: If the new email belongs to someone else
            UsernameAlreadyExistsError: If the new username belongs to someone else
        """
        ...

    async def delete_account(self, user_id: str) -> User:
        """
        Delete the account and, through the store, all of its tasks.

        Raises:
            ProfileNotFoundError: If the user doesn't exist
        """
        ...
