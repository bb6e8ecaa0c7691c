from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim, ensure_admin
from tenant_notes.core.config import settings
from tenant_notes.core.errors import AlreadyOnTargetPlan, Forbidden, NotFound, QuotaExceeded
from tenant_notes.core.repositories.tenants import TenantRepository
from tenant_notes.models.enums import SubscriptionTier
from tenant_notes.models.note import Note
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User

logger = logging.getLogger(__name__)


class ResourceKind(str, enum.Enum):
    NOTES = "notes"
    USERS = "users"


_RESOURCE_MODELS: dict[ResourceKind, type[Note] | type[User]] = {
    ResourceKind.NOTES: Note,
    ResourceKind.USERS: User,
}

_LIMIT_MESSAGES: dict[ResourceKind, str] = {
    ResourceKind.NOTES: "Note limit reached. Upgrade to Pro for unlimited notes.",
    ResourceKind.USERS: "User limit reached. Upgrade to Pro for unlimited users.",
}


@dataclass(slots=True, frozen=True)
class TierLimits:
    tier: SubscriptionTier
    notes: int | None
    users: int | None

    def limit_for(self, kind: ResourceKind) -> int | None:
        return self.notes if kind is ResourceKind.NOTES else self.users


@dataclass(slots=True)
class SubscriptionStatus:
    tier: SubscriptionTier
    usage: dict[str, int]
    limits: dict[str, int | None]
    can_upgrade: bool
    is_limit_reached: dict[str, bool]


def tier_to_limits(tier: SubscriptionTier | str) -> TierLimits:
    normalized = SubscriptionTier(tier)
    if normalized is SubscriptionTier.PRO:
        return TierLimits(tier=SubscriptionTier.PRO, notes=None, users=None)

    return TierLimits(
        tier=SubscriptionTier.FREE,
        notes=settings.free_note_limit,
        users=settings.free_user_limit,
    )


class QuotaChecker:
    """Decides whether a tenant may create one more unit of a resource.

    The count and the caller's later insert are not one transaction, so two
    concurrent creates at the boundary can both pass.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count(self, tenant_id: UUID, kind: ResourceKind) -> int:
        model = _RESOURCE_MODELS[kind]
        total = await self.session.scalar(
            select(func.count(model.id)).where(model.tenant_id == tenant_id)
        )
        return int(total or 0)

    async def can_create(self, tenant: Tenant, kind: ResourceKind) -> bool:
        limit = tier_to_limits(tenant.subscription_tier).limit_for(kind)
        if limit is None:
            return True
        return await self.count(tenant.id, kind) < limit

    async def ensure_can_create(self, tenant: Tenant, kind: ResourceKind) -> None:
        if not await self.can_create(tenant, kind):
            logger.info("Quota reached for tenant=%s kind=%s", tenant.slug, kind.value)
            raise QuotaExceeded(_LIMIT_MESSAGES[kind])


async def subscription_status(session: AsyncSession, tenant_id: UUID) -> SubscriptionStatus:
    tenant = await TenantRepository(session).get(tenant_id)
    if tenant is None:
        raise NotFound("Tenant not found")

    checker = QuotaChecker(session)
    limits = tier_to_limits(tenant.subscription_tier)

    usage: dict[str, int] = {}
    reached: dict[str, bool] = {}
    for kind in ResourceKind:
        usage[kind.value] = await checker.count(tenant.id, kind)
        limit = limits.limit_for(kind)
        reached[kind.value] = limit is not None and usage[kind.value] >= limit

    return SubscriptionStatus(
        tier=limits.tier,
        usage=usage,
        limits={kind.value: limits.limit_for(kind) for kind in ResourceKind},
        can_upgrade=limits.tier is SubscriptionTier.FREE,
        is_limit_reached=reached,
    )


async def upgrade_tenant(session: AsyncSession, slug: str, actor: IdentityClaim) -> Tenant:
    ensure_admin(actor)

    repository = TenantRepository(session)
    tenant = await repository.get_by_slug((slug or "").strip().lower())
    # An unknown slug and someone else's tenant look the same from here.
    if tenant is None or tenant.id != actor.tenant_id:
        raise Forbidden("Tenant not found or access denied")

    if SubscriptionTier(tenant.subscription_tier) is SubscriptionTier.PRO:
        raise AlreadyOnTargetPlan()

    tenant = await repository.set_tier(tenant, SubscriptionTier.PRO)
    await session.commit()
    logger.info("Tenant %s upgraded to PRO by user=%s", tenant.slug, actor.user_id)
    return tenant
