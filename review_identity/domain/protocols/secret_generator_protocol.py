"""Secret generator protocol.

Cryptographically secure secrets for the two email-proof flows.
"""

from typing import Protocol

from review_identity.core.errors import ValidationError
from review_identity.core.result import Result


class SecretGeneratorProtocol(Protocol):
    """CSPRNG-backed token and code generation."""

    def random_token(self) -> str:
        """32 random bytes, hex-encoded (64 characters)."""
        ...

    def numeric_code(self, digits: int) -> Result[str, ValidationError]:
        """Uniform decimal code of exactly `digits` characters, zero-padded.

        Returns:
            Failure(INVALID_LENGTH) when digits <= 0.
        """
        ...
