"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from review_identity.core.errors import ConflictError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.entities.user import User
from review_identity.domain.enums import UserRole
from review_identity.domain.errors import AuthErrors
from review_identity.infrastructure.persistence.base import ensure_utc
from review_identity.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, user: User) -> Result[User, ConflictError]:
        """Insert a new user.

        The unique index on email is the source of truth: a concurrent
        registration that slipped past the service's pre-check lands here
        as an IntegrityError and becomes EMAIL_ALREADY_USED.

        Args:
            user: Domain User entity to persist.

        Returns:
            Success(user) or Failure(EMAIL_ALREADY_USED).
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(error=AuthErrors.EMAIL_ALREADY_USED)
        await self.session.refresh(user_model)
        return Success(value=self._to_domain(user_model))

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Emails are stored normalized, so this is an exact match on the
        normalized form (which keeps the unique index usable).

        Args:
            email: Normalized email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Update existing user in database (full overwrite).

        Raises:
            NoResultFound: If user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.email = user.email
        user_model.password_hash = user.password_hash
        user_model.display_name = user.display_name
        user_model.role = user.role.value
        user_model.email_verified = user.email_verified
        user_model.email_verified_at = user.email_verified_at
        user_model.updated_at = user.updated_at

        await self.session.commit()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            display_name=user_model.display_name,
            role=UserRole(user_model.role),
            email_verified=user_model.email_verified,
            email_verified_at=(
                ensure_utc(user_model.email_verified_at)
                if user_model.email_verified_at
                else None
            ),
            created_at=ensure_utc(user_model.created_at),
            updated_at=ensure_utc(user_model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            display_name=user.display_name,
            role=user.role.value,
            email_verified=user.email_verified,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
