"""
Authentication service implementation.

Registers users, checks credentials, and mints and verifies session tokens.
"""

import asyncio
import logging
import secrets
from typing import Optional

from shared.exceptions import UniqueViolationError
from shared.models import AuthenticatedUser
from modules.users.repository import UserRepository
from modules.users.service import conflict_from_violation, ensure_identity_available

from .interfaces import IAuthService, IPasswordHasher, ITokenSigner
from .models import AuthResult, LoginRequest, LogoutResponse, RegisterRequest
from .exceptions import InvalidCredentialsError, UserNotFoundError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Collaborators are passed in explicitly; see api/dependencies.py for
    the production wiring.

    Args:
        users: Repository for the `users` table
        token_signer: Signs and verifies session tokens
        password_hasher: Hashes and checks passwords
    """

    def __init__(
        self,
        users: UserRepository,
        token_signer: ITokenSigner,
        password_hasher: IPasswordHasher,
    ):
        self._users = users
        self._tokens = token_signer
        self._hasher = password_hasher
        self._decoy_hash: Optional[str] = None

    async def register(self, request: RegisterRequest) -> AuthResult:
        ensure_identity_available(self._users, request.email, request.username)

        data = {
            "first_name": request.first_name,
            "last_name": request.last_name,
            "email": request.email,
            "username": request.username,
            "password_hash": await asyncio.to_thread(self._hasher.hash, request.password),
        }

        try:
            record = self._users.create(data)
        except UniqueViolationError as e:
            # Lost a race with a concurrent registration
            raise conflict_from_violation(e) from e

        logger.info(f"Registered user {record.id} ({record.username})")
        return AuthResult(
            access_token=self._tokens.sign(record.id, record.username),
            user=record.to_public(),
        )

    async def login(self, request: LoginRequest) -> AuthResult:
        record = self._users.get_by_email(request.email)

        # Unknown emails still pay for one verify so timing matches
        digest = record.password_hash if record is not None else await self._decoy_digest()
        valid = await asyncio.to_thread(self._hasher.verify, request.password, digest)

        if record is None or not valid:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info(f"User {record.id} logged in")
        return AuthResult(
            access_token=self._tokens.sign(record.id, record.username),
            user=record.to_public(),
        )

    async def validate(self, user_id: str) -> AuthenticatedUser:
        record = self._users.get_by_id(user_id)
        if record is None:
            raise UserNotFoundError(user_id)

        return AuthenticatedUser(
            id=record.id,
            username=record.username,
            email=record.email,
            first_name=record.first_name,
            last_name=record.last_name,
        )

    async def verify_token(self, token: str) -> AuthenticatedUser:
        payload = self._tokens.verify(token)
        return await self.validate(payload.sub)

    async def logout(self, user: AuthenticatedUser) -> LogoutResponse:
        # Tokens are not tracked server-side; the caller drops the cookie.
        logger.info(f"User {user.id} logged out")
        return LogoutResponse(user_id=user.id)

    async def _decoy_digest(self) -> str:
        """A digest of a random password, made once with the real hasher."""
        if self._decoy_hash is None:
            self._decoy_hash = await asyncio.to_thread(self._hasher.hash, secrets.token_urlsafe(16))
        return self._decoy_hash
