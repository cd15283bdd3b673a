"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with fakes and swapping the
signing or hashing backend without touching the service.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResult, LoginRequest, LogoutResponse, RegisterRequest, TokenPayload


@runtime_checkable
class ITokenSigner(Protocol):
    """Opaque sign/verify capability for session tokens."""

    def sign(self, user_id: str, username: str) -> str:
        """Mint a signed, time-limited token for the user."""
        ...

    def verify(self, token: str) -> TokenPayload:
        """
        Verify a token and return its payload.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """Opaque one-way hashing capability for passwords."""

    def hash(self, password: str) -> str:
        """Compute a salted digest of the password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a digest in constant time."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def register(self, request: RegisterRequest) -> AuthResult:
        """
        Register a new user and mint a session token.

        Raises:
            EmailAlreadyExistsError: If the email is taken
            UsernameAlreadyExistsError: If the username is taken
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResult:
        """
        Authenticate with email and password and mint a session token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def validate(self, user_id: str) -> AuthenticatedUser:
        """
        Resolve a user ID from a verified token into the caller identity.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

    async def verify_token(self, token: str) -> AuthenticatedUser:
        """
        Verify a session token and resolve the caller identity.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or the user no longer exists
        """
        ...

    async def logout(self, user: AuthenticatedUser) -> LogoutResponse:
        """Acknowledge a logout. No server-side state changes."""
        ...
