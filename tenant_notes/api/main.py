from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tenant_notes.api.errors import register_exception_handlers
from tenant_notes.api.routes.auth import router as auth_router
from tenant_notes.api.routes.health import router as health_router
from tenant_notes.api.routes.notes import router as notes_router
from tenant_notes.api.routes.subscription import router as subscription_router
from tenant_notes.api.routes.tenants import router as tenants_router
from tenant_notes.api.routes.users import router as users_router
from tenant_notes.core.config import settings
from tenant_notes.core.db import build_engine, build_session_factory
from tenant_notes.models.base import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=settings.log_level.upper())

    engine = build_engine(app.state.database_url)
    if app.state.create_schema:
        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    logger.info("Database engine ready (%s)", engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        app.state.session_factory = None
        await engine.dispose()


def create_app(database_url: str | None = None, *, create_schema: bool | None = None) -> FastAPI:
    app = FastAPI(title="Tenant Notes", lifespan=lifespan)
    app.state.database_url = database_url or settings.database_url
    app.state.create_schema = settings.auto_create_schema if create_schema is None else create_schema
    app.state.session_factory = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router, prefix="/api")
    app.include_router(tenants_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(subscription_router, prefix="/api")
    return app


app = create_app()
