"""Emissão e validação de tokens de sessão (JWT assinado).

Payload: `userId`, `email`, `iat`, `exp`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from app.domain.errors import AuthenticationError
from config.settings.auth import AuthSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identidade extraída de um token válido."""

    user_id: str
    email: str
    expires_at: datetime


class TokenService:
    """Assina e valida tokens com o segredo configurado."""

    __slots__ = ("_algorithm", "_secret", "_ttl")

    def __init__(self, settings: AuthSettings) -> None:
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._ttl = timedelta(days=settings.token_ttl_days)

    def issue(self, user_id: str, email: str, *, now: datetime | None = None) -> str:
        """Gera token para o usuário.

        Args:
            user_id: Id do usuário autenticado
            email: E-mail do usuário
            now: Instante de emissão (testes)

        Returns:
            Token JWT compacto
        """
        issued_at = now or datetime.now(UTC)
        payload = {
            "userId": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Valida assinatura e expiração.

        Raises:
            AuthenticationError: token expirado, adulterado ou sem userId.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token expirado") from exc
        except jwt.InvalidTokenError as exc:
            logger.info("token_rejected", extra={"error_type": type(exc).__name__})
            raise AuthenticationError("Token inválido") from exc

        user_id = payload.get("userId")
        if not isinstance(user_id, str) or not user_id:
            raise AuthenticationError("Token inválido")

        return TokenClaims(
            user_id=user_id,
            email=str(payload.get("email", "")),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
