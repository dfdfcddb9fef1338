"""Email value object with validation.

Immutable value object that normalizes and validates an email address.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


def normalize_email(raw: str) -> str:
    """Trim surrounding whitespace and lowercase.

    Lookups (login, send-code) use this without validating, so a malformed
    address simply finds nothing.
    """
    return raw.strip().lower()


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator for RFC-compliant syntax checks. The stored value is
    the trimmed, fully lowercased address, which is the form used for the
    uniqueness constraint.

    Attributes:
        value: The email address string (validated, lowercase)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> str(Email("  Reader@Example.COM "))
        'reader@example.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize, then validate.

        Raises:
            ValueError: If email format is invalid.
        """
        normalized = normalize_email(self.value)
        try:
            # No deliverability (DNS) check
            validate_email(normalized, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
