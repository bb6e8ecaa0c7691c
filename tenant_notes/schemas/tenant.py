from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from tenant_notes.models.enums import SubscriptionTier
from tenant_notes.models.tenant import Tenant


class TenantCreateRequest(BaseModel):
    slug: str = Field(min_length=2, max_length=63)
    name: str = Field(min_length=1, max_length=120)


class TenantSummary(BaseModel):
    id: UUID
    slug: str
    name: str
    subscription: SubscriptionTier

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> TenantSummary:
        return cls(
            id=tenant.id,
            slug=tenant.slug,
            name=tenant.name,
            subscription=tenant.subscription_tier,
        )


class TenantResponse(BaseModel):
    success: bool = True
    message: str | None = None
    tenant: TenantSummary
