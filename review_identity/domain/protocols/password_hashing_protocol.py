"""Password hashing port (implemented by BcryptPasswordService)."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """One-way password hashes."""

    def hash_password(self, password: str) -> str:
        """Salted hash of `password`, safe to store."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Timing-safe check; False (never an exception) for a bad hash."""
        ...
