from tenant_notes.schemas.auth import (
    AccountUser,
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from tenant_notes.schemas.common import ErrorResponse, HealthResponse, MessageResponse
from tenant_notes.schemas.note import NoteListResponse, NoteOut, NoteResponse, NoteWriteRequest
from tenant_notes.schemas.subscription import SubscriptionStatusResponse
from tenant_notes.schemas.tenant import TenantCreateRequest, TenantResponse, TenantSummary
from tenant_notes.schemas.user import (
    UserInviteRequest,
    UserInviteResponse,
    UserListResponse,
    UserOut,
)

__all__ = [
    "AccountUser",
    "AuthResponse",
    "LoginRequest",
    "MeResponse",
    "RegisterRequest",
    "ErrorResponse",
    "MessageResponse",
    "NoteWriteRequest",
    "NoteOut",
    "NoteResponse",
    "NoteListResponse",
    "SubscriptionStatusResponse",
    "HealthResponse",
    "TenantCreateRequest",
    "TenantSummary",
    "TenantResponse",
    "UserInviteRequest",
    "UserOut",
    "UserListResponse",
    "UserInviteResponse",
]
