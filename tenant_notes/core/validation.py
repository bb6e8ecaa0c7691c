from __future__ import annotations

import re

from email_validator import EmailNotValidError
from email_validator import validate_email as _check_email

from tenant_notes.core.errors import ValidationError

EMAIL_MAX_LENGTH = 254
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128

_SLUG_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]{1,62}$")


def require_text(value: str | None, field: str, *, max_length: int | None = None) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required")
    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return cleaned


def validate_email(email: str | None) -> str:
    normalized = (email or "").strip().lower()
    if not normalized:
        raise ValidationError("Email is required")
    try:
        checked = _check_email(normalized, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError("Invalid email format") from exc
    return checked.normalized.lower()


def validate_password(password: str | None) -> str:
    password = password or ""
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if len(password) > PASSWORD_MAX_LENGTH:
        raise ValidationError(f"Password must be at most {PASSWORD_MAX_LENGTH} characters long")
    return password


def validate_slug(slug: str | None) -> str:
    normalized = (slug or "").strip().lower()
    if not _SLUG_PATTERN.match(normalized):
        raise ValidationError("Tenant slug must be 2-63 lowercase letters, digits or dashes")
    return normalized
