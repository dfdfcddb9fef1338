"""PasswordHashingProtocol on bcrypt.

Passwords longer than bcrypt's 72-byte input are refused by the credential
policy in AuthService, so they never reach hash_password.
"""

import bcrypt

MIN_COST_FACTOR = 10
MAX_COST_FACTOR = 20


class BcryptPasswordService:
    """Salted bcrypt hashes with a fixed cost.

    Args:
        cost_factor: log2 of the work factor, MIN_COST_FACTOR..MAX_COST_FACTOR.
            12 costs roughly a quarter second per hash.

    Raises:
        ValueError: If cost_factor is out of range.
    """

    def __init__(self, cost_factor: int = 12) -> None:
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = (
                f"bcrypt cost factor must be between {MIN_COST_FACTOR} and "
                f"{MAX_COST_FACTOR}, got {cost_factor}"
            )
            raise ValueError(msg)
        self._rounds = cost_factor

    def hash_password(self, password: str) -> str:
        """Return a 60-character `$2b$<cost>$...` hash."""
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("ascii")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Constant-time check. A malformed hash never matches."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            return False
