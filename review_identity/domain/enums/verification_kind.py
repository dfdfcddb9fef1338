"""Verification record kinds.

Both email-proof flows share one storage table; the kind tag keeps their
secrets in separate namespaces so a numeric code can never be redeemed as a
link token (or the other way round).
"""

from enum import Enum


class VerificationKind(str, Enum):
    """Which email-proof flow a verification record belongs to."""

    REGISTRATION_CODE = "registration_code"
    """Pre-registration numeric code, looked up by (email, code).

    Unlinked (user_id is None) until the registration completes.
    """

    EMAIL_LINK = "email_link"
    """Post-registration link token, looked up by token alone.

    Carries the user id from the moment it is created.
    """
