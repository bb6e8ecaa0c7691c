from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.config import settings
from tenant_notes.core.db import build_engine, build_session_factory
from tenant_notes.core.repositories.tenants import TenantRepository
from tenant_notes.core.repositories.users import UserRepository, get_user_by_email
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.models.base import Base
from tenant_notes.models.enums import SubscriptionTier, UserRole

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SeedTenant:
    slug: str
    name: str
    tier: SubscriptionTier


DEMO_TENANTS = (
    SeedTenant(slug="acme", name="Acme Corporation", tier=SubscriptionTier.PRO),
    SeedTenant(slug="globex", name="Globex Corporation", tier=SubscriptionTier.FREE),
)


async def seed_demo_data(session: AsyncSession, hasher: PasswordHasher, password: str) -> dict[str, int]:
    """Create the demo tenants and their admin/member accounts.

    Existing tenants and emails are left untouched, so re-running is safe.
    """
    created = {"tenants": 0, "users": 0}
    password_hash = await asyncio.to_thread(hasher.hash, password)
    tenants = TenantRepository(session)

    for entry in DEMO_TENANTS:
        tenant = await tenants.get_by_slug(entry.slug)
        if tenant is None:
            tenant = await tenants.create(slug=entry.slug, name=entry.name, subscription_tier=entry.tier)
            created["tenants"] += 1

        users = UserRepository(session, tenant.id)
        for local_part, role in (("admin", UserRole.ADMIN), ("user", UserRole.MEMBER)):
            email = f"{local_part}@{entry.slug}.test"
            if await get_user_by_email(session, email) is not None:
                continue
            await users.create(email=email, password_hash=password_hash, role=role)
            created["users"] += 1

    await session.commit()
    return created


async def _run(database_url: str, password: str, create_schema: bool) -> dict[str, int]:
    engine = build_engine(database_url)
    try:
        if create_schema:
            async with engine.begin() as connection:
                await connection.run_sync(Base.metadata.create_all)
        session_factory = build_session_factory(engine)
        async with session_factory() as session:
            return await seed_demo_data(session, PasswordHasher(rounds=settings.bcrypt_rounds), password)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed demo tenants and users.")
    parser.add_argument("--database-url", default=settings.database_url)
    parser.add_argument("--password", default="password", help="Password for every seeded account")
    parser.add_argument("--create-schema", action="store_true", help="Create tables before seeding")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting database seed")
    created = asyncio.run(_run(args.database_url, args.password, args.create_schema))
    logger.info("Seed completed: tenants=%s users=%s", created["tenants"], created["users"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
