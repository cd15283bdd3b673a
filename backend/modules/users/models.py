"""
Users module data models.

`UserRecord` is the stored row including the password digest and never
leaves the backend. `User` is the outward representation.
"""

import re
from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, EmailStr, Field

from shared.models import ApiModel


PASSWORD_SYMBOLS = "@$!%*?&^#()[]{}-_=+\\|;:'\",.<>/?"

_PASSWORD_ALLOWED = re.compile(r"^[A-Za-z\d" + re.escape(PASSWORD_SYMBOLS) + r"]+$")
_HAS_LETTER = re.compile(r"[A-Za-z]")
_HAS_DIGIT = re.compile(r"\d")


def validate_password_strength(value: str) -> str:
    """
    Check the password complexity policy.

    A password must contain at least one letter, one digit and one symbol,
    and only letters, digits and symbols from PASSWORD_SYMBOLS.
    Length bounds are declared on the field itself.
    """
    if (
        not _PASSWORD_ALLOWED.match(value)
        or not _HAS_LETTER.search(value)
        or not _HAS_DIGIT.search(value)
        or not any(ch in PASSWORD_SYMBOLS for ch in value)
    ):
        raise ValueError(
            "Password must be at least 8 characters long and include at least "
            "one letter, one number, and one special character"
        )
    return value


PersonName = Annotated[str, Field(min_length=3, max_length=25)]
Username = Annotated[str, Field(min_length=3, max_length=20)]
Password = Annotated[
    str,
    Field(min_length=8, max_length=40),
    AfterValidator(validate_password_strength),
]


class User(ApiModel):
    """A user as exposed by the API (no password digest)."""

    id: str = Field(..., description="User ID (UUID)")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: EmailStr = Field(..., description="Email address")
    username: str = Field(..., description="Unique username")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class UserRecord(BaseModel):
    """A stored user row, including the password digest."""

    id: str
    first_name: str
    last_name: str
    email: str
    username: str
    password_hash: str = Field(..., repr=False)
    created_at: datetime
    updated_at: datetime

    def to_public(self) -> User:
        """Strip the password digest."""
        return User(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            username=self.username,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UpdateUserRequest(ApiModel):
    """Partial profile update. Omitted fields keep their current value."""

    first_name: Optional[PersonName] = None
    last_name: Optional[PersonName] = None
    email: Optional[EmailStr] = None
    username: Optional[Username] = None
    password: Optional[Password] = None
