from tenant_notes.models.base import Base, TenantScopedBase, TimestampedBase
from tenant_notes.models.enums import SubscriptionTier, UserRole
from tenant_notes.models.note import Note
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User

__all__ = [
    "Base",
    "TimestampedBase",
    "TenantScopedBase",
    "SubscriptionTier",
    "UserRole",
    "Tenant",
    "User",
    "Note",
]
