from __future__ import annotations

from pydantic import BaseModel

from tenant_notes.models.enums import SubscriptionTier


class ResourceUsage(BaseModel):
    notes: int
    users: int


class ResourceLimits(BaseModel):
    notes: int | None
    users: int | None


class LimitFlags(BaseModel):
    notes: bool
    users: bool


class SubscriptionStatusResponse(BaseModel):
    success: bool = True
    subscription: SubscriptionTier
    usage: ResourceUsage
    limits: ResourceLimits
    can_upgrade: bool
    is_limit_reached: LimitFlags
