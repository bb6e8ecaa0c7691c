from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.repositories.base import TenantScopedRepository
from tenant_notes.models.note import Note


class NoteRepository(TenantScopedRepository[Note]):
    def __init__(self, session: AsyncSession, tenant_id: UUID) -> None:
        super().__init__(session=session, model=Note, tenant_id=tenant_id)
