"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class ProfileNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyExistsError(ConflictError):
    """Raised when another account already uses the email."""

    def __init__(self) -> None:
        super().__init__("Email already exists", code="EMAIL_TAKEN")


class UsernameAlreadyExistsError(ConflictError):
    """Raised when another account already uses the username."""

    def __init__(self) -> None:
        super().__init__("Username already exists", code="USERNAME_TAKEN")
