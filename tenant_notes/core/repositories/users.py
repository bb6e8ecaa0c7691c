from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.repositories.base import TenantScopedRepository
from tenant_notes.models.user import User


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    # Emails are unique across tenants, so this lookup is deliberately unscoped.
    return await session.scalar(select(User).where(User.email == normalize_email(email)))


async def get_user_by_id(session: AsyncSession, user_id: UUID) -> User | None:
    return await session.scalar(select(User).where(User.id == user_id))


class UserRepository(TenantScopedRepository[User]):
    def __init__(self, session: AsyncSession, tenant_id: UUID) -> None:
        super().__init__(session=session, model=User, tenant_id=tenant_id)
