from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tenant_notes.models.base import TenantScopedBase


class Note(TenantScopedBase):
    __tablename__ = "notes"
    __table_args__ = (Index("ix_notes_tenant_created", "tenant_id", "created_at"),)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
