"""
Password hashing with bcrypt.
"""

import bcrypt

from .interfaces import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt digests with a configurable cost factor (default 10)."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed digest or a password bcrypt refuses (over 72 bytes)
            return False
