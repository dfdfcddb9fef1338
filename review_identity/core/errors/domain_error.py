"""DomainError: the value carried by every Failure.

Not an Exception. Two errors with the same code, message and details
compare equal, so catalogue entries (AuthErrors.INVALID_CREDENTIALS, ...)
can be asserted on directly.
"""

from dataclasses import dataclass

from review_identity.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Tagged error value.

    Attributes:
        code: Tag that callers and the HTTP layer branch on.
        message: Text safe to show to the client.
        details: Extra context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
