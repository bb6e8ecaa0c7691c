from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim, require_identity
from tenant_notes.core.db import get_db_session
from tenant_notes.core.quotas import subscription_status
from tenant_notes.schemas.subscription import (
    LimitFlags,
    ResourceLimits,
    ResourceUsage,
    SubscriptionStatusResponse,
)

router = APIRouter(prefix="/subscription", tags=["subscription"])


@router.get("/status", response_model=SubscriptionStatusResponse)
async def get_subscription_status(
    identity: IdentityClaim = Depends(require_identity),
    session: AsyncSession = Depends(get_db_session),
) -> SubscriptionStatusResponse:
    current = await subscription_status(session, identity.tenant_id)
    return SubscriptionStatusResponse(
        subscription=current.tier,
        usage=ResourceUsage(**current.usage),
        limits=ResourceLimits(**current.limits),
        can_upgrade=current.can_upgrade,
        is_limit_reached=LimitFlags(**current.is_limit_reached),
    )
