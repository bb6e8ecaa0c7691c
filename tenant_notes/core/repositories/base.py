from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from tenant_notes.models.base import TenantScopedBase

ModelT = TypeVar("ModelT", bound=TenantScopedBase)


class TenantScopedRepository(Generic[ModelT]):
    """CRUD over one table, always filtered by the owning tenant.

    The tenant id is fixed at construction and is expected to come from a
    verified identity claim. Nothing passed to the methods can widen it.
    """

    def __init__(self, session: AsyncSession, model: type[ModelT], tenant_id: UUID) -> None:
        self.session = session
        self.model = model
        self.tenant_id = tenant_id

    def _scoped_select(self) -> Select[tuple[ModelT]]:
        return select(self.model).where(self.model.tenant_id == self.tenant_id)

    async def create(self, **values: object) -> ModelT:
        payload = dict(values)
        payload["tenant_id"] = self.tenant_id
        instance = self.model(**payload)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get(self, entity_id: UUID) -> ModelT | None:
        result = await self.session.execute(
            self._scoped_select().where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def list(self, *, limit: int | None = None, offset: int = 0) -> list[ModelT]:
        stmt = self._scoped_select().order_by(self.model.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        total = await self.session.scalar(
            select(func.count(self.model.id)).where(self.model.tenant_id == self.tenant_id)
        )
        return int(total or 0)

    async def update(self, entity_id: UUID, **values: object) -> ModelT | None:
        instance = await self.get(entity_id)
        if instance is None:
            return None

        for field, value in values.items():
            if field in {"id", "tenant_id", "created_at"}:
                continue
            setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, entity_id: UUID) -> bool:
        result = await self.session.execute(
            delete(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.tenant_id == self.tenant_id)
        )
        return (result.rowcount or 0) > 0
