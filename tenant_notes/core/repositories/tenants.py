from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.models.enums import SubscriptionTier
from tenant_notes.models.tenant import Tenant


class TenantRepository:
    """Lookups on the tenants table itself, which is not tenant-scoped."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, tenant_id: UUID) -> Tenant | None:
        return await self.session.scalar(select(Tenant).where(Tenant.id == tenant_id))

    async def get_by_slug(self, slug: str) -> Tenant | None:
        return await self.session.scalar(select(Tenant).where(Tenant.slug == slug))

    async def create(
        self,
        *,
        slug: str,
        name: str,
        subscription_tier: SubscriptionTier = SubscriptionTier.FREE,
    ) -> Tenant:
        tenant = Tenant(slug=slug, name=name, subscription_tier=subscription_tier)
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def set_tier(self, tenant: Tenant, tier: SubscriptionTier) -> Tenant:
        tenant.subscription_tier = tier
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
