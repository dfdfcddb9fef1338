"""Secret generator (adapter).

Email verification secrets from the OS CSPRNG (`secrets` module).

    random_token: 32 bytes, hex-encoded (64 characters), for links
    numeric_code: uniform decimal string, zero-padded, for registration codes

`secrets.randbelow` samples uniformly by rejection, so codes carry no
modulo bias.
"""

import secrets

from review_identity.core.constants import TOKEN_BYTES
from review_identity.core.errors import ValidationError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.errors import SecretErrors


class SecretGenerator:
    """CSPRNG-backed secret generator."""

    def random_token(self) -> str:
        """64-character hex token.

        Example:
            >>> len(SecretGenerator().random_token())
            64
        """
        return secrets.token_hex(TOKEN_BYTES)

    def numeric_code(self, digits: int) -> Result[str, ValidationError]:
        """Random code of exactly `digits` decimal characters.

        Args:
            digits: Code length.

        Returns:
            Success(code), or Failure(INVALID_LENGTH) when digits <= 0.

        Example:
            >>> SecretGenerator().numeric_code(6)
            Success(value='048213')
        """
        if digits <= 0:
            return Failure(error=SecretErrors.INVALID_LENGTH)
        value = secrets.randbelow(10**digits)
        return Success(value=str(value).zfill(digits))
