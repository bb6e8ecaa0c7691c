from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.accounts import register_tenant
from tenant_notes.core.auth import IdentityClaim, require_identity
from tenant_notes.core.db import get_db_session
from tenant_notes.core.quotas import upgrade_tenant
from tenant_notes.schemas.tenant import TenantCreateRequest, TenantResponse, TenantSummary

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    payload: TenantCreateRequest,
    session: AsyncSession = Depends(get_db_session),
) -> TenantResponse:
    tenant = await register_tenant(session, payload.slug, payload.name)
    return TenantResponse(message="Tenant created successfully", tenant=TenantSummary.from_tenant(tenant))


@router.post("/{slug}/upgrade", response_model=TenantResponse)
async def upgrade(
    slug: str,
    identity: IdentityClaim = Depends(require_identity),
    session: AsyncSession = Depends(get_db_session),
) -> TenantResponse:
    tenant = await upgrade_tenant(session, slug, identity)
    return TenantResponse(
        message="Successfully upgraded to Pro plan",
        tenant=TenantSummary.from_tenant(tenant),
    )
