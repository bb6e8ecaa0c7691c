from __future__ import annotations

import asyncio
import logging
import secrets

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.auth import IdentityClaim, ensure_admin
from tenant_notes.core.config import settings
from tenant_notes.core.errors import Conflict, NotFound, ValidationError
from tenant_notes.core.quotas import QuotaChecker, ResourceKind
from tenant_notes.core.repositories.tenants import TenantRepository
from tenant_notes.core.repositories.users import UserRepository, get_user_by_email
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.validation import validate_email
from tenant_notes.models.enums import UserRole
from tenant_notes.models.user import User

logger = logging.getLogger(__name__)


def generate_temp_password(nbytes: int | None = None) -> str:
    return secrets.token_urlsafe(nbytes or settings.temp_password_bytes)


async def insert_user(session: AsyncSession, repository: UserRepository, **values: object) -> User:
    try:
        return await repository.create(**values)
    except IntegrityError as exc:
        # Lost a race with another request for the same email.
        await session.rollback()
        raise Conflict("User already exists") from exc


class UserService:
    def __init__(self, session: AsyncSession, identity: IdentityClaim, hasher: PasswordHasher) -> None:
        self.session = session
        self.identity = identity
        self.hasher = hasher
        self.users = UserRepository(session, identity.tenant_id)

    async def list_users(self) -> list[User]:
        ensure_admin(self.identity)
        return await self.users.list()

    async def invite_user(self, email: str, role: UserRole | str = UserRole.MEMBER) -> tuple[User, str]:
        """Create a user in the caller's tenant with a one-time password.

        The plaintext password is returned to the caller exactly once. Only the
        bcrypt hash is stored and the plaintext is never logged.
        """
        ensure_admin(self.identity)

        email = validate_email(email)
        try:
            role = UserRole(str(getattr(role, "value", role)).upper())
        except ValueError as exc:
            raise ValidationError("Role must be ADMIN or MEMBER") from exc

        if await get_user_by_email(self.session, email) is not None:
            raise Conflict("User already exists")

        tenant = await TenantRepository(self.session).get(self.identity.tenant_id)
        if tenant is None:
            raise NotFound("Tenant not found")
        await QuotaChecker(self.session).ensure_can_create(tenant, ResourceKind.USERS)

        temp_password = generate_temp_password()
        password_hash = await asyncio.to_thread(self.hasher.hash, temp_password)
        user = await insert_user(
            self.session,
            self.users,
            email=email,
            password_hash=password_hash,
            role=role,
        )
        await self.session.commit()

        logger.info(
            "User %s invited to tenant=%s role=%s by user=%s",
            user.id,
            tenant.slug,
            role.value,
            self.identity.user_id,
        )
        return user, temp_password
