from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from tenant_notes.core.notes import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH


class NoteWriteRequest(BaseModel):
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    content: str = Field(max_length=CONTENT_MAX_LENGTH)


class NoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    author_id: UUID
    created_at: datetime
    updated_at: datetime


class NoteResponse(BaseModel):
    success: bool = True
    note: NoteOut


class NoteListResponse(BaseModel):
    success: bool = True
    notes: list[NoteOut]
