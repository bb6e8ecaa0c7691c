from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.db import check_database_health, get_db_session
from tenant_notes.schemas.common import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health_check(session: AsyncSession = Depends(get_db_session)) -> JSONResponse:
    database_ok = await check_database_health(session)
    payload = HealthResponse(
        success=database_ok,
        status="ok" if database_ok else "error",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database="connected" if database_ok else "disconnected",
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=payload.model_dump(),
    )
