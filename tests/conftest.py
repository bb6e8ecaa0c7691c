from __future__ import annotations

import os

# Settings are read at import time, so these must be in place first.
os.environ.setdefault("JWT_SECRET", "test-only-secret-for-tenant-notes")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncIterator, Iterator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from tenant_notes.api.main import create_app  # noqa: E402
from tenant_notes.core.auth import IdentityClaim, claim_for  # noqa: E402
from tenant_notes.core.db import build_engine, build_session_factory  # noqa: E402
from tenant_notes.core.repositories.tenants import TenantRepository  # noqa: E402
from tenant_notes.core.repositories.users import UserRepository  # noqa: E402
from tenant_notes.core.security.passwords import PasswordHasher  # noqa: E402
from tenant_notes.core.security.tokens import TokenCodec  # noqa: E402
from tenant_notes.models.base import Base  # noqa: E402
from tenant_notes.models.enums import SubscriptionTier, UserRole  # noqa: E402

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def session() -> AsyncIterator[AsyncSession]:
    engine = build_engine(SQLITE_MEMORY_URL)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    session_factory = build_session_factory(engine)
    async with session_factory() as db_session:
        yield db_session
    await engine.dispose()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec("unit-test-secret", ttl_seconds=3600)


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_app(SQLITE_MEMORY_URL, create_schema=True)
    with TestClient(app) as test_client:
        yield test_client


async def make_member(
    session: AsyncSession,
    hasher: PasswordHasher,
    *,
    slug: str,
    email: str,
    role: UserRole = UserRole.ADMIN,
    tier: SubscriptionTier = SubscriptionTier.FREE,
    password: str = "secret123",
) -> IdentityClaim:
    """Insert a tenant (if new) and one user, returning the user's claim."""
    tenants = TenantRepository(session)
    tenant = await tenants.get_by_slug(slug)
    if tenant is None:
        tenant = await tenants.create(slug=slug, name=slug.title(), subscription_tier=tier)

    user = await UserRepository(session, tenant.id).create(
        email=email,
        password_hash=hasher.hash(password),
        role=role,
    )
    await session.commit()
    return claim_for(user, tenant)
