from tenant_notes.core.repositories.base import TenantScopedRepository
from tenant_notes.core.repositories.notes import NoteRepository
from tenant_notes.core.repositories.tenants import TenantRepository
from tenant_notes.core.repositories.users import (
    UserRepository,
    get_user_by_email,
    get_user_by_id,
    normalize_email,
)

__all__ = [
    "TenantScopedRepository",
    "NoteRepository",
    "TenantRepository",
    "UserRepository",
    "get_user_by_email",
    "get_user_by_id",
    "normalize_email",
]
