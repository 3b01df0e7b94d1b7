"""Password hashing."""

from dataclasses import dataclass
from typing import Protocol

import bcrypt

# bcrypt only reads the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


class PasswordHasher(Protocol):
    """One-way salted password hash with verification."""

    def hash(self, password: str) -> str:
        """Return a salted hash for the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return true when the password matches the stored hash."""


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


@dataclass
class BcryptPasswordHasher(PasswordHasher):
    """bcrypt-backed password hasher."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            return False
