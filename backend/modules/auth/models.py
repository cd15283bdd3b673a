"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, EmailStr, Field

from shared.models import ApiModel
from modules.users.models import Password, PersonName, User, Username


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    username: str = Field(..., description="Username at issuance")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class RegisterRequest(ApiModel):
    """Request to register a new account."""

    first_name: PersonName = Field(..., description="First name", examples=["John"])
    last_name: PersonName = Field(..., description="Last name", examples=["Doe"])
    email: EmailStr = Field(..., description="Email address", examples=["john.doe@example.com"])
    username: Username = Field(..., description="Unique username", examples=["johndoe"])
    password: Password = Field(..., description="Password", examples=["SecurePassword123!"])


class LoginRequest(ApiModel):
    """Request to sign in."""

    email: EmailStr = Field(..., description="Email of the user")
    password: str = Field(..., min_length=1, description="Password of the user")


class AuthResult(BaseModel):
    """Outcome of a successful register or login."""

    access_token: str = Field(..., repr=False)
    user: User


class AuthResponse(ApiModel):
    """Body returned by register and login. The token travels in the cookie."""

    user: User


class LogoutResponse(ApiModel):
    """Body returned by logout."""

    message: str = Field(default="Successfully logged out")
    user_id: str = Field(..., description="ID of the logged out user")
