from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.accounts import current_identity, login, register_user
from tenant_notes.core.auth import IdentityClaim, require_identity
from tenant_notes.core.db import get_db_session
from tenant_notes.core.security.dependencies import get_password_hasher, get_token_codec
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.security.tokens import TokenCodec
from tenant_notes.schemas.auth import (
    AccountUser,
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from tenant_notes.schemas.common import MessageResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
async def login_user(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthResponse:
    result = await login(session, hasher, codec, payload.email, payload.password)
    return AuthResponse(
        token=result.token,
        user=AccountUser.from_models(result.user, result.tenant),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthResponse:
    result = await register_user(
        session,
        hasher,
        codec,
        email=payload.email,
        password=payload.password,
        tenant_slug=payload.tenant_slug,
    )
    return AuthResponse(
        message="User created successfully",
        token=result.token,
        user=AccountUser.from_models(result.user, result.tenant),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout() -> MessageResponse:
    # Tokens are stateless; the client drops its copy.
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=MeResponse)
async def me(
    identity: IdentityClaim = Depends(require_identity),
    session: AsyncSession = Depends(get_db_session),
) -> MeResponse:
    user, tenant = await current_identity(session, identity)
    return MeResponse(user=AccountUser.from_models(user, tenant))
