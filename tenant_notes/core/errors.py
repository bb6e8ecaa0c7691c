from __future__ import annotations


class AppError(Exception):
    """Base error for request-level failures that map to an HTTP response."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, code: str | None = None) -> None:
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class ValidationError(AppError):
    """Bad input shape or length; the caller fixes the input."""

    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class Unauthenticated(AppError):
    """Missing, malformed, invalid or expired credential."""

    status_code = 401
    code = "UNAUTHENTICATED"
    default_message = "Unauthorized"


class InvalidCredentials(Unauthenticated):
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password"


class Forbidden(AppError):
    """Authenticated, but the role or ownership does not allow the operation."""

    status_code = 403
    code = "FORBIDDEN"
    default_message = "Admin access required"


class QuotaExceeded(AppError):
    """Business-rule rejection: the tenant's plan does not allow another unit."""

    status_code = 403
    code = "LIMIT_REACHED"
    default_message = "Plan limit reached. Upgrade to Pro for unlimited usage."


class NotFound(AppError):
    """Row missing, or owned by another tenant. The two are indistinguishable."""

    status_code = 404
    code = "NOT_FOUND"
    default_message = "Not found"


class Conflict(AppError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource already exists"


class AlreadyOnTargetPlan(AppError):
    status_code = 400
    code = "ALREADY_ON_PLAN"
    default_message = "Already on Pro plan"


class InfrastructureError(AppError):
    """Store unreachable or otherwise broken. Never exposes internal detail."""
