"""EmailVerificationRepository - SQLAlchemy implementation.

Lookups are scoped by kind so link tokens and registration codes live in
separate namespaces. Consumption (mark_used, link_token_to_user) is a
conditional UPDATE on used = false; rowcount tells the caller whether it
won.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from review_identity.domain.entities.verification_record import VerificationRecord
from review_identity.domain.enums import VerificationKind
from review_identity.infrastructure.persistence.base import ensure_utc
from review_identity.infrastructure.persistence.models.email_verification import (
    EmailVerification,
)


def _to_domain(model: EmailVerification) -> VerificationRecord:
    """Convert database model to domain entity."""
    return VerificationRecord(
        id=model.id,
        kind=VerificationKind(model.kind),
        email=model.email,
        secret=model.secret,
        expires_at=ensure_utc(model.expires_at),
        used=model.used,
        user_id=model.user_id,
        created_at=ensure_utc(model.created_at),
        updated_at=ensure_utc(model.updated_at),
    )


class EmailVerificationRepository:
    """SQLAlchemy implementation of EmailVerificationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        *,
        kind: VerificationKind,
        email: str,
        secret: str,
        expires_at: datetime,
        user_id: UUID | None = None,
    ) -> VerificationRecord:
        now = datetime.now(UTC)
        model = EmailVerification(
            kind=kind.value,
            email=email,
            secret=secret,
            expires_at=expires_at,
            user_id=user_id,
            used=False,
            created_at=now,
            updated_at=now,
        )
        self.session.add(model)
        await self.session.commit()
        return _to_domain(model)

    async def get_by_token(self, token: str) -> VerificationRecord | None:
        stmt = (
            select(EmailVerification)
            .where(
                EmailVerification.kind == VerificationKind.EMAIL_LINK.value,
                EmailVerification.secret == token,
            )
            .order_by(EmailVerification.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return _to_domain(model) if model else None

    async def get_by_email_and_token(
        self, email: str, token: str
    ) -> VerificationRecord | None:
        stmt = select(EmailVerification).where(
            EmailVerification.kind == VerificationKind.REGISTRATION_CODE.value,
            EmailVerification.email == email,
            EmailVerification.secret == token,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def get_latest_by_user_id(self, user_id: UUID) -> VerificationRecord | None:
        stmt = (
            select(EmailVerification)
            .where(EmailVerification.user_id == user_id)
            .order_by(EmailVerification.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return _to_domain(model) if model else None

    async def mark_used(
        self,
        secret: str,
        *,
        kind: VerificationKind,
        email: str | None = None,
    ) -> bool:
        """Consume an unused record by its secret.

        Returns:
            True if a record went from unused to used in this call.
        """
        now = datetime.now(UTC)
        conditions = [
            EmailVerification.kind == kind.value,
            EmailVerification.secret == secret,
            EmailVerification.used.is_(False),
        ]
        if email is not None:
            conditions.append(EmailVerification.email == email)
        stmt = (
            update(EmailVerification)
            .where(*conditions)
            .values(used=True, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def link_token_to_user(self, record_id: UUID, user_id: UUID) -> bool:
        """Attach the user and consume the record in one statement."""
        now = datetime.now(UTC)
        stmt = (
            update(EmailVerification)
            .where(
                EmailVerification.id == record_id,
                EmailVerification.used.is_(False),
            )
            .values(user_id=user_id, used=True, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1

    async def delete_expired_or_used(self) -> int:
        now = datetime.now(UTC)
        stmt = (
            delete(EmailVerification)
            .where(
                or_(
                    EmailVerification.used.is_(True),
                    EmailVerification.expires_at <= now,
                )
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def delete_by_user_id(self, user_id: UUID) -> int:
        stmt = (
            delete(EmailVerification)
            .where(EmailVerification.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def delete_by_email(self, email: str) -> int:
        """Delete registration codes issued to the email (links are kept)."""
        stmt = (
            delete(EmailVerification)
            .where(
                EmailVerification.kind == VerificationKind.REGISTRATION_CODE.value,
                EmailVerification.email == email,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0
