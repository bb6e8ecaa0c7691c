from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from tenant_notes.core.validation import EMAIL_MAX_LENGTH, PASSWORD_MAX_LENGTH
from tenant_notes.models.enums import UserRole
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User
from tenant_notes.schemas.tenant import TenantSummary


class LoginRequest(BaseModel):
    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    password: str = Field(max_length=PASSWORD_MAX_LENGTH)


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(max_length=PASSWORD_MAX_LENGTH)
    tenant_slug: str = Field(max_length=63)


class AccountUser(BaseModel):
    id: UUID
    email: str
    role: UserRole
    tenant: TenantSummary

    @classmethod
    def from_models(cls, user: User, tenant: Tenant) -> AccountUser:
        return cls(
            id=user.id,
            email=user.email,
            role=user.role,
            tenant=TenantSummary.from_tenant(tenant),
        )


class AuthResponse(BaseModel):
    success: bool = True
    message: str | None = None
    token: str
    user: AccountUser


class MeResponse(BaseModel):
    success: bool = True
    user: AccountUser
