from __future__ import annotations

import enum


class SubscriptionTier(str, enum.Enum):
    FREE = "FREE"
    PRO = "PRO"


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
