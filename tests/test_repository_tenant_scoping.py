from __future__ import annotations

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession

from conftest import make_member
from tenant_notes.core.repositories.base import TenantScopedRepository
from tenant_notes.core.repositories.notes import NoteRepository
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.models.base import utcnow
from tenant_notes.models.note import Note


def test_scoped_select_contains_tenant_filter() -> None:
    tenant_id = uuid4()
    repo = NoteRepository(session=Mock(), tenant_id=tenant_id)

    stmt = repo._scoped_select()
    sql = str(stmt.compile(dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}))

    assert "WHERE" in sql
    assert "notes.tenant_id" in sql
    assert str(tenant_id) in sql or tenant_id.hex in sql


@pytest.mark.asyncio
async def test_create_forces_repository_tenant_id() -> None:
    tenant_id = uuid4()
    session = Mock()
    session.add = Mock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()

    repo = TenantScopedRepository(session=session, model=Note, tenant_id=tenant_id)
    created = await repo.create(title="t", content="c", author_id=uuid4(), tenant_id=uuid4())

    assert created.tenant_id == tenant_id
    session.add.assert_called_once_with(created)
    session.flush.assert_awaited_once()
    session.refresh.assert_awaited_once_with(created)


@pytest.mark.asyncio
async def test_update_cannot_move_row_to_another_tenant(
    session: AsyncSession, hasher: PasswordHasher
) -> None:
    acme = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    globex = await make_member(session, hasher, slug="globex", email="admin@globex.com")

    repo = NoteRepository(session, acme.tenant_id)
    note = await repo.create(title="Mine", content="body", author_id=acme.user_id)

    updated = await repo.update(note.id, title="Still mine", tenant_id=globex.tenant_id)

    assert updated is not None
    assert updated.title == "Still mine"
    assert updated.tenant_id == acme.tenant_id
    assert await NoteRepository(session, globex.tenant_id).get(note.id) is None


@pytest.mark.asyncio
async def test_count_and_delete_stay_inside_tenant(session: AsyncSession, hasher: PasswordHasher) -> None:
    acme = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    globex = await make_member(session, hasher, slug="globex", email="admin@globex.com")

    acme_notes = NoteRepository(session, acme.tenant_id)
    globex_notes = NoteRepository(session, globex.tenant_id)
    note = await acme_notes.create(title="A", content="a", author_id=acme.user_id)
    await globex_notes.create(title="G", content="g", author_id=globex.user_id, created_at=utcnow())

    assert await acme_notes.count() == 1
    assert await globex_notes.count() == 1
    assert await globex_notes.delete(note.id) is False
    assert await acme_notes.delete(note.id) is True
    assert await acme_notes.count() == 0
