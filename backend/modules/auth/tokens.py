"""
Session token signing with PyJWT.

Tokens are HS256 JWTs carrying the user ID (`sub`) and username.
They are not stored server-side: validity is signature plus expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .interfaces import ITokenSigner
from .models import TokenPayload


class JWTTokenSigner(ITokenSigner):
    """Signs and verifies session tokens with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=24),
        now: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise RuntimeError(
                "Token signing not configured. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in
        self._now = now or (lambda: datetime.now(timezone.utc))

    @property
    def expires_in(self) -> timedelta:
        """Token lifetime."""
        return self._expires_in

    def sign(self, user_id: str, username: str) -> str:
        issued_at = self._now()
        payload = {
            "sub": user_id,
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenPayload:
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            return TokenPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError() from e
        except PydanticValidationError as e:
            raise InvalidTokenError() from e
