from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt


class TokenError(ValueError):
    pass


class TokenCodec:
    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl_seconds: int = 604800) -> None:
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = timedelta(seconds=ttl_seconds)

    def sign(self, claims: dict[str, Any], ttl: timedelta | None = None) -> str:
        issued_at = datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = int(issued_at.timestamp())
        payload["exp"] = int((issued_at + (ttl or self.ttl)).timestamp())
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise TokenError("Invalid or expired token") from exc
