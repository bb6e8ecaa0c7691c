from tenant_notes.core.security.dependencies import get_password_hasher, get_token_codec
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.security.tokens import TokenCodec, TokenError

__all__ = [
    "PasswordHasher",
    "TokenCodec",
    "TokenError",
    "get_password_hasher",
    "get_token_codec",
]
