from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim, claim_for
from tenant_notes.core.errors import Conflict, InvalidCredentials, NotFound, ValidationError
from tenant_notes.core.quotas import QuotaChecker, ResourceKind
from tenant_notes.core.repositories.tenants import TenantRepository
from tenant_notes.core.repositories.users import UserRepository, get_user_by_email, get_user_by_id
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.security.tokens import TokenCodec
from tenant_notes.core.users import insert_user
from tenant_notes.core.validation import require_text, validate_email, validate_password, validate_slug
from tenant_notes.models.enums import UserRole
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User

logger = logging.getLogger(__name__)

TENANT_NAME_MAX_LENGTH = 120


@dataclass(slots=True)
class AuthSession:
    claim: IdentityClaim
    token: str
    user: User
    tenant: Tenant


def _issue(codec: TokenCodec, user: User, tenant: Tenant) -> AuthSession:
    claim = claim_for(user, tenant)
    return AuthSession(claim=claim, token=codec.sign(claim.to_claims()), user=user, tenant=tenant)


async def login(
    session: AsyncSession,
    hasher: PasswordHasher,
    codec: TokenCodec,
    email: str,
    password: str,
) -> AuthSession:
    if not (email or "").strip() or not password:
        raise ValidationError("Email and password are required")

    user = await get_user_by_email(session, email)
    if user is None:
        await asyncio.to_thread(hasher.burn, password)
        logger.warning("Login failed: no account for the supplied email")
        raise InvalidCredentials()

    if not await asyncio.to_thread(hasher.verify, password, user.password_hash):
        logger.warning("Login failed: bad password for user=%s", user.id)
        raise InvalidCredentials()

    tenant = await TenantRepository(session).get(user.tenant_id)
    if tenant is None:
        logger.error("User %s references missing tenant=%s", user.id, user.tenant_id)
        raise InvalidCredentials()

    logger.info("User %s logged in to tenant=%s", user.id, tenant.slug)
    return _issue(codec, user, tenant)


async def register_tenant(session: AsyncSession, slug: str, name: str) -> Tenant:
    slug = validate_slug(slug)
    name = require_text(name, "Tenant name", max_length=TENANT_NAME_MAX_LENGTH)

    repository = TenantRepository(session)
    if await repository.get_by_slug(slug) is not None:
        raise Conflict("Tenant already exists")

    try:
        tenant = await repository.create(slug=slug, name=name)
    except IntegrityError as exc:
        await session.rollback()
        raise Conflict("Tenant already exists") from exc

    await session.commit()
    logger.info("Tenant %s registered", tenant.slug)
    return tenant


async def register_user(
    session: AsyncSession,
    hasher: PasswordHasher,
    codec: TokenCodec,
    *,
    email: str,
    password: str,
    tenant_slug: str,
) -> AuthSession:
    """Self-registration into an existing tenant.

    The first account of a tenant becomes its administrator; every later one
    is a member. A role asked for by the client is never honoured.
    """
    email = validate_email(email)
    password = validate_password(password)

    if await get_user_by_email(session, email) is not None:
        raise Conflict("User already exists with this email")

    tenant = await TenantRepository(session).get_by_slug((tenant_slug or "").strip().lower())
    if tenant is None:
        raise ValidationError("Invalid tenant")

    await QuotaChecker(session).ensure_can_create(tenant, ResourceKind.USERS)

    users = UserRepository(session, tenant.id)
    role = UserRole.ADMIN if await users.count() == 0 else UserRole.MEMBER
    password_hash = await asyncio.to_thread(hasher.hash, password)
    user = await insert_user(session, users, email=email, password_hash=password_hash, role=role)
    await session.commit()

    logger.info("User %s registered in tenant=%s role=%s", user.id, tenant.slug, role.value)
    return _issue(codec, user, tenant)


async def current_identity(session: AsyncSession, claim: IdentityClaim) -> tuple[User, Tenant]:
    user = await get_user_by_id(session, claim.user_id)
    if user is None or user.tenant_id != claim.tenant_id:
        raise NotFound("User not found")

    tenant = await TenantRepository(session).get(user.tenant_id)
    if tenant is None:
        raise NotFound("Tenant not found")
    return user, tenant
