from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from conftest import make_member
from tenant_notes.core.errors import NotFound, QuotaExceeded, ValidationError
from tenant_notes.core.notes import NoteService
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.models.enums import SubscriptionTier, UserRole


@pytest.mark.asyncio
async def test_note_crud_roundtrip(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    service = NoteService(session, admin)

    created = await service.create_note("  Groceries ", "milk, eggs")
    assert created.title == "Groceries"
    assert created.tenant_id == admin.tenant_id
    assert created.author_id == admin.user_id
    assert created.created_at == created.updated_at

    fetched = await service.get_note(created.id)
    assert fetched.id == created.id

    updated = await service.update_note(created.id, "Groceries", "milk, eggs, bread")
    assert updated.content == "milk, eggs, bread"
    assert updated.created_at <= updated.updated_at

    await service.delete_note(created.id)
    with pytest.raises(NotFound):
        await service.get_note(created.id)
    with pytest.raises(NotFound):
        await service.delete_note(created.id)


@pytest.mark.asyncio
async def test_any_member_of_the_tenant_can_edit_notes(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    member = await make_member(session, hasher, slug="acme", email="user@acme.com", role=UserRole.MEMBER)

    note = await NoteService(session, admin).create_note("Plan", "draft")
    edited = await NoteService(session, member).update_note(note.id, "Plan", "final")

    assert edited.content == "final"
    assert edited.author_id == admin.user_id


@pytest.mark.asyncio
async def test_notes_of_other_tenants_look_missing(session: AsyncSession, hasher: PasswordHasher) -> None:
    acme = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    globex = await make_member(session, hasher, slug="globex", email="admin@globex.com")

    secret = await NoteService(session, acme).create_note("Acme only", "classified")
    intruder = NoteService(session, globex)

    with pytest.raises(NotFound):
        await intruder.get_note(secret.id)
    with pytest.raises(NotFound):
        await intruder.update_note(secret.id, "Hijacked", "oops")
    with pytest.raises(NotFound):
        await intruder.delete_note(secret.id)
    assert await intruder.list_notes() == []

    survivor = await NoteService(session, acme).get_note(secret.id)
    assert survivor.title == "Acme only"


@pytest.mark.asyncio
async def test_unknown_note_id(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(session, hasher, slug="acme", email="admin@acme.com")

    with pytest.raises(NotFound):
        await NoteService(session, admin).get_note(uuid4())


@pytest.mark.asyncio
async def test_free_tenant_note_quota(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    service = NoteService(session, admin)
    for index in range(3):
        await service.create_note(f"Note {index}", "body")

    with pytest.raises(QuotaExceeded) as exc:
        await service.create_note("Note 4", "body")
    assert exc.value.code == "LIMIT_REACHED"
    assert len(await service.list_notes()) == 3

    # Deleting frees a slot again.
    notes = await service.list_notes()
    await service.delete_note(notes[0].id)
    await service.create_note("Replacement", "body")


@pytest.mark.asyncio
async def test_pro_tenant_has_no_note_quota(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(
        session, hasher, slug="acme", email="admin@acme.com", tier=SubscriptionTier.PRO
    )
    service = NoteService(session, admin)
    for index in range(6):
        await service.create_note(f"Note {index}", "body")

    assert len(await service.list_notes()) == 6


@pytest.mark.asyncio
async def test_quota_is_counted_per_tenant(session: AsyncSession, hasher: PasswordHasher) -> None:
    acme = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    globex = await make_member(session, hasher, slug="globex", email="admin@globex.com")
    for index in range(3):
        await NoteService(session, acme).create_note(f"Acme {index}", "body")

    await NoteService(session, globex).create_note("Globex 0", "body")


@pytest.mark.asyncio
async def test_note_field_validation(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    service = NoteService(session, admin)

    with pytest.raises(ValidationError):
        await service.create_note("   ", "body")
    with pytest.raises(ValidationError):
        await service.create_note("Title", "")
    with pytest.raises(ValidationError):
        await service.create_note("x" * 201, "body")
    with pytest.raises(ValidationError):
        await service.create_note("Title", "x" * 10_001)

    note = await service.create_note("Title", "body")
    with pytest.raises(ValidationError):
        await service.update_note(note.id, "", "body")
    assert (await service.get_note(note.id)).title == "Title"


@pytest.mark.asyncio
async def test_list_notes_newest_first(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(
        session, hasher, slug="acme", email="admin@acme.com", tier=SubscriptionTier.PRO
    )
    service = NoteService(session, admin)
    for index in range(4):
        await service.create_note(f"Note {index}", "body")

    notes = await service.list_notes()
    stamps = [note.created_at for note in notes]
    assert stamps == sorted(stamps, reverse=True)
    assert {note.title for note in notes} == {f"Note {index}" for index in range(4)}


@pytest.mark.asyncio
async def test_malformed_note_id_is_not_found(session: AsyncSession, hasher: PasswordHasher) -> None:
    admin = await make_member(session, hasher, slug="acme", email="admin@acme.com")
    service = NoteService(session, admin)
    note = await service.create_note("Keep", "body")

    with pytest.raises(NotFound):
        await service.get_note("clx123abc")
    with pytest.raises(NotFound):
        await service.update_note("clx123abc", "Title", "body")
    with pytest.raises(NotFound):
        await service.delete_note("")

    assert (await service.get_note(str(note.id))).title == "Keep"
