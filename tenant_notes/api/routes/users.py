from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim, require_admin
from tenant_notes.core.db import get_db_session
from tenant_notes.core.security.dependencies import get_password_hasher
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.users import UserService
from tenant_notes.schemas.user import UserInviteRequest, UserInviteResponse, UserListResponse, UserOut

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(
    identity: IdentityClaim = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(session, identity, hasher)


@router.get("", response_model=UserListResponse)
async def list_users(service: UserService = Depends(get_user_service)) -> UserListResponse:
    users = await service.list_users()
    return UserListResponse(users=[UserOut.model_validate(user) for user in users])


@router.post("", response_model=UserInviteResponse, status_code=status.HTTP_201_CREATED)
async def invite_user(
    payload: UserInviteRequest,
    service: UserService = Depends(get_user_service),
) -> UserInviteResponse:
    user, temp_password = await service.invite_user(payload.email, payload.role)
    return UserInviteResponse(
        message="User created successfully",
        user=UserOut.model_validate(user),
        temp_password=temp_password,
    )
