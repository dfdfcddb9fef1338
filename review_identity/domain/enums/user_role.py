"""User roles.

Role Hierarchy:
    admin > user

    - admin: Site administration (seeded at bootstrap)
    - user: Default role for every self-registered account

Usage:
    from review_identity.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str so the value is stored and serialized as-is.
    """

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['admin', 'user'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role."""
        return value in cls.values()
