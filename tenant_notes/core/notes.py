from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim
from tenant_notes.core.errors import NotFound
from tenant_notes.core.quotas import QuotaChecker, ResourceKind
from tenant_notes.core.repositories.notes import NoteRepository
from tenant_notes.core.repositories.tenants import TenantRepository
from tenant_notes.core.validation import require_text
from tenant_notes.models.base import utcnow
from tenant_notes.models.note import Note

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10_000


def _parse_note_id(note_id: UUID | str) -> UUID:
    if isinstance(note_id, UUID):
        return note_id
    try:
        return UUID(str(note_id))
    except ValueError as exc:
        # A malformed id matches no row.
        raise NotFound("Note not found") from exc


def _clean_note_fields(title: str | None, content: str | None) -> tuple[str, str]:
    return (
        require_text(title, "Title", max_length=TITLE_MAX_LENGTH),
        require_text(content, "Content", max_length=CONTENT_MAX_LENGTH),
    )


class NoteService:
    """Note CRUD for the caller's tenant.

    Any user of a tenant may read, edit or delete any of its notes. A note of
    another tenant is reported as missing, never as forbidden.
    """

    def __init__(self, session: AsyncSession, identity: IdentityClaim) -> None:
        self.session = session
        self.identity = identity
        self.notes = NoteRepository(session, identity.tenant_id)

    async def list_notes(self) -> list[Note]:
        return await self.notes.list()

    async def create_note(self, title: str, content: str) -> Note:
        title, content = _clean_note_fields(title, content)

        tenant = await TenantRepository(self.session).get(self.identity.tenant_id)
        if tenant is None:
            raise NotFound("Tenant not found")
        await QuotaChecker(self.session).ensure_can_create(tenant, ResourceKind.NOTES)

        now = utcnow()
        note = await self.notes.create(
            title=title,
            content=content,
            author_id=self.identity.user_id,
            created_at=now,
            updated_at=now,
        )
        await self.session.commit()
        logger.info("Note %s created in tenant=%s", note.id, tenant.slug)
        return note

    async def get_note(self, note_id: UUID | str) -> Note:
        note = await self.notes.get(_parse_note_id(note_id))
        if note is None:
            raise NotFound("Note not found")
        return note

    async def update_note(self, note_id: UUID | str, title: str, content: str) -> Note:
        title, content = _clean_note_fields(title, content)

        note = await self.notes.update(_parse_note_id(note_id), title=title, content=content, updated_at=utcnow())
        if note is None:
            raise NotFound("Note not found")

        await self.session.commit()
        return note

    async def delete_note(self, note_id: UUID | str) -> None:
        deleted = await self.notes.delete(_parse_note_id(note_id))
        if not deleted:
            raise NotFound("Note not found")

        await self.session.commit()
        logger.info("Note %s deleted from tenant=%s", note_id, self.identity.tenant_slug)
