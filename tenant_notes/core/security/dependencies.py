from tenant_notes.core.config import settings
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.security.tokens import TokenCodec


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_codec() -> TokenCodec:
    secret = (settings.jwt_secret or "").strip()
    if not secret or secret == "replace_with_jwt_secret":
        raise ValueError("JWT_SECRET is not configured")
    return TokenCodec(
        secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )
