from tenant_notes.api.routes.auth import router as auth_router
from tenant_notes.api.routes.health import router as health_router
from tenant_notes.api.routes.notes import router as notes_router
from tenant_notes.api.routes.subscription import router as subscription_router
from tenant_notes.api.routes.tenants import router as tenants_router
from tenant_notes.api.routes.users import router as users_router

__all__ = [
    "auth_router",
    "health_router",
    "notes_router",
    "subscription_router",
    "tenants_router",
    "users_router",
]
