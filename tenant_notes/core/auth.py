from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tenant_notes.core.errors import Forbidden, Unauthenticated
from tenant_notes.core.security.dependencies import get_token_codec
from tenant_notes.core.security.tokens import TokenCodec, TokenError
from tenant_notes.models.enums import UserRole
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(slots=True, frozen=True)
class IdentityClaim:
    """Who is calling, as vouched for by a verified session token.

    ``tenant_id`` is the only key handlers may scope data access by.
    ``tenant_slug`` is captured at issuance for display and is not re-checked.
    """

    user_id: UUID
    email: str
    role: UserRole
    tenant_id: UUID
    tenant_slug: str

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def to_claims(self) -> dict[str, str]:
        return {
            "sub": str(self.user_id),
            "email": self.email,
            "role": self.role.value,
            "tenant_id": str(self.tenant_id),
            "tenant_slug": self.tenant_slug,
        }

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> IdentityClaim:
        try:
            return cls(
                user_id=UUID(str(claims["sub"])),
                email=str(claims["email"]),
                role=UserRole(claims["role"]),
                tenant_id=UUID(str(claims["tenant_id"])),
                tenant_slug=str(claims["tenant_slug"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise Unauthenticated("Token is missing required claims") from exc


def claim_for(user: User, tenant: Tenant) -> IdentityClaim:
    return IdentityClaim(
        user_id=user.id,
        email=user.email,
        role=UserRole(user.role),
        tenant_id=tenant.id,
        tenant_slug=tenant.slug,
    )


def authenticate(token: str | None, codec: TokenCodec) -> IdentityClaim:
    if not token:
        raise Unauthenticated("Missing bearer token")

    try:
        claims = codec.verify(token)
    except TokenError as exc:
        raise Unauthenticated("Invalid or expired token") from exc

    return IdentityClaim.from_claims(claims)


def ensure_admin(identity: IdentityClaim) -> IdentityClaim:
    if not identity.is_admin:
        raise Forbidden("Admin access required")
    return identity


async def require_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    codec: TokenCodec = Depends(get_token_codec),
) -> IdentityClaim:
    token = credentials.credentials if credentials is not None else None
    return authenticate(token, codec)


async def require_admin(
    identity: IdentityClaim = Depends(require_identity),
) -> IdentityClaim:
    return ensure_admin(identity)
