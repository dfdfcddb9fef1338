"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture. Store failures other than the
email uniqueness conflict are raised by the adapter and wrapped by the
calling service.
"""

from typing import Protocol
from uuid import UUID

from review_identity.core.errors import ConflictError
from review_identity.core.result import Result
from review_identity.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Methods:
        create: Insert a new user (uniqueness enforced by the store)
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by normalized email
        save: Full overwrite of an existing user
    """

    async def create(self, user: User) -> Result[User, ConflictError]:
        """Insert a new user.

        Returns:
            Success(user), or Failure(EMAIL_ALREADY_USED) when the unique
            email constraint rejects the row.
        """
        ...

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID. None means not found."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by normalized email address.

        Args:
            email: Trimmed, lowercased email.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Overwrite every mutable field of an existing user."""
        ...
