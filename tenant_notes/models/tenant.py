from __future__ import annotations

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from tenant_notes.models.base import TimestampedBase
from tenant_notes.models.enums import SubscriptionTier


class Tenant(TimestampedBase):
    __tablename__ = "tenants"

    slug: Mapped[str] = mapped_column(String(63), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    subscription_tier: Mapped[SubscriptionTier] = mapped_column(
        Enum(SubscriptionTier, name="subscription_tier", native_enum=False, length=16),
        nullable=False,
        default=SubscriptionTier.FREE,
    )
