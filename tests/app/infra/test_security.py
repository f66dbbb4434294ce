from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from app.domain.errors import AuthenticationError
from app.infra.security import PasswordHasher, TokenService
from config.settings import AuthSettings

SECRET = "test-secret-with-at-least-32-characters!"


def test_password_hash_is_salted() -> None:
    hasher = PasswordHasher()

    first = hasher.hash("segredo")
    second = hasher.hash("segredo")

    assert first != second
    assert first.startswith("scrypt")
    assert hasher.verify(first, "segredo") is True
    assert hasher.verify(first, "outra") is False
    assert hasher.verify("", "segredo") is False


def test_token_round_trip_claims() -> None:
    tokens = TokenService(AuthSettings(jwt_secret=SECRET, token_ttl_days=7))
    issued_at = datetime.now(UTC).replace(microsecond=0)

    claims = tokens.verify(tokens.issue("user-1", "maria@example.com", now=issued_at))

    assert claims.user_id == "user-1"
    assert claims.email == "maria@example.com"
    assert claims.expires_at == issued_at + timedelta(days=7)


def test_expired_token() -> None:
    tokens = TokenService(AuthSettings(jwt_secret=SECRET, token_ttl_days=1))
    token = tokens.issue("user-1", "m@x.com", now=datetime.now(UTC) - timedelta(days=2))

    with pytest.raises(AuthenticationError, match="Token expirado"):
        tokens.verify(token)


def test_token_signed_with_other_secret() -> None:
    token = TokenService(AuthSettings(jwt_secret="x" * 40)).issue("user-1", "m@x.com")

    with pytest.raises(AuthenticationError, match="Token inválido"):
        TokenService(AuthSettings(jwt_secret=SECRET)).verify(token)


def test_token_without_user_id() -> None:
    token = jwt.encode(
        {"email": "m@x.com", "exp": datetime.now(UTC) + timedelta(days=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(AuthenticationError):
        TokenService(AuthSettings(jwt_secret=SECRET)).verify(token)
