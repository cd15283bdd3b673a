"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for models exchanged over HTTP.

    Attributes are snake_case in Python and camelCase on the wire.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(ApiModel):
    """
    Represents an authenticated user in the system.

    Populated from a verified session token and the user record it points
    to, and made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID)")
    username: str = Field(..., description="Username")
    email: EmailStr = Field(..., description="User's email address")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,  # Make immutable for safety
        extra="ignore",
    )
