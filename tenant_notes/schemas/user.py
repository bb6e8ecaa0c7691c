from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

from tenant_notes.models.enums import UserRole


class UserInviteRequest(BaseModel):
    email: EmailStr
    role: UserRole = UserRole.MEMBER

    @field_validator("role", mode="before")
    @classmethod
    def _uppercase_role(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    role: UserRole
    created_at: datetime


class UserListResponse(BaseModel):
    success: bool = True
    users: list[UserOut]


class UserInviteResponse(BaseModel):
    success: bool = True
    message: str
    user: UserOut
    temp_password: str
