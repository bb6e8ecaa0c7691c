from __future__ import annotations


from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim, require_identity
from tenant_notes.core.db import get_db_session
from tenant_notes.core.notes import NoteService
from tenant_notes.schemas.common import MessageResponse
from tenant_notes.schemas.note import NoteListResponse, NoteOut, NoteResponse, NoteWriteRequest

router = APIRouter(prefix="/notes", tags=["notes"])


def get_note_service(
    identity: IdentityClaim = Depends(require_identity),
    session: AsyncSession = Depends(get_db_session),
) -> NoteService:
    return NoteService(session, identity)


@router.get("", response_model=NoteListResponse)
async def list_notes(service: NoteService = Depends(get_note_service)) -> NoteListResponse:
    notes = await service.list_notes()
    return NoteListResponse(notes=[NoteOut.model_validate(note) for note in notes])


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    payload: NoteWriteRequest,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.create_note(payload.title, payload.content)
    return NoteResponse(note=NoteOut.model_validate(note))


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: str, service: NoteService = Depends(get_note_service)) -> NoteResponse:
    note = await service.get_note(note_id)
    return NoteResponse(note=NoteOut.model_validate(note))


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    payload: NoteWriteRequest,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.update_note(note_id, payload.title, payload.content)
    return NoteResponse(note=NoteOut.model_validate(note))


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(note_id: str, service: NoteService = Depends(get_note_service)) -> MessageResponse:
    await service.delete_note(note_id)
    return MessageResponse(message="Note deleted successfully")
