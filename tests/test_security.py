from __future__ import annotations

from datetime import timedelta

import pytest

from tenant_notes.core.security.dependencies import get_password_hasher, get_token_codec
from tenant_notes.core.security.passwords import PasswordHasher
from tenant_notes.core.security.tokens import TokenCodec, TokenError


def test_password_hash_roundtrip(hasher: PasswordHasher) -> None:
    hashed = hasher.hash("correct horse")

    assert hashed != "correct horse"
    assert hasher.verify("correct horse", hashed) is True
    assert hasher.verify("wrong horse", hashed) is False


def test_password_hashes_are_salted(hasher: PasswordHasher) -> None:
    assert hasher.hash("same-password") != hasher.hash("same-password")


def test_password_verify_rejects_garbage_hash(hasher: PasswordHasher) -> None:
    assert hasher.verify("anything", "") is False
    assert hasher.verify("anything", "not-a-bcrypt-hash") is False


def test_password_longer_than_bcrypt_limit(hasher: PasswordHasher) -> None:
    long_password = "x" * 100
    hashed = hasher.hash(long_password)
    assert hasher.verify(long_password, hashed) is True


def test_burn_does_not_raise(hasher: PasswordHasher) -> None:
    hasher.burn("whatever")


def test_token_sign_and_verify(codec: TokenCodec) -> None:
    token = codec.sign({"sub": "user-1", "tenant_id": "t-1"})
    claims = codec.verify(token)

    assert claims["sub"] == "user-1"
    assert claims["tenant_id"] == "t-1"
    assert claims["exp"] - claims["iat"] == 3600


def test_token_expired_is_rejected(codec: TokenCodec) -> None:
    token = codec.sign({"sub": "user-1"}, ttl=timedelta(seconds=-60))
    with pytest.raises(TokenError):
        codec.verify(token)


def test_token_signed_with_other_secret_is_rejected(codec: TokenCodec) -> None:
    foreign = TokenCodec("some-other-secret").sign({"sub": "user-1"})
    with pytest.raises(TokenError):
        codec.verify(foreign)


def test_token_garbage_is_rejected(codec: TokenCodec) -> None:
    with pytest.raises(TokenError):
        codec.verify("not.a.jwt")


def test_get_token_codec_requires_configured_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    from tenant_notes.core.security import dependencies

    monkeypatch.setattr(dependencies.settings, "jwt_secret", "")
    with pytest.raises(ValueError, match="JWT_SECRET"):
        get_token_codec()

    monkeypatch.setattr(dependencies.settings, "jwt_secret", "replace_with_jwt_secret")
    with pytest.raises(ValueError, match="JWT_SECRET"):
        get_token_codec()

    monkeypatch.setattr(dependencies.settings, "jwt_secret", "a-real-secret")
    monkeypatch.setattr(dependencies.settings, "token_ttl_seconds", 120)
    codec = get_token_codec()
    assert isinstance(codec, TokenCodec)
    assert codec.ttl == timedelta(seconds=120)


def test_get_password_hasher_uses_configured_rounds(monkeypatch: pytest.MonkeyPatch) -> None:
    from tenant_notes.core.security import dependencies

    monkeypatch.setattr(dependencies.settings, "bcrypt_rounds", 5)
    assert get_password_hasher().rounds == 5
