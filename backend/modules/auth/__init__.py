"""
Authentication module.

Handles registration, login, session token issuance and validation.

Public API:
- IAuthService: Interface for auth operations
- ITokenSigner / IPasswordHasher: Signing and hashing capabilities
- RegisterRequest, LoginRequest, AuthResult: Request and result models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, ITokenSigner, IPasswordHasher
from .models import (
    AuthResult,
    AuthResponse,
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    TokenPayload,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenSigner",
    "IPasswordHasher",
    # Models
    "AuthResult",
    "AuthResponse",
    "LoginRequest",
    "LogoutResponse",
    "RegisterRequest",
    "TokenPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "UserNotFoundError",
]
