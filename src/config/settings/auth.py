"""Settings de autenticação (JWT)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEV_JWT_SECRET = "onde-tem-dev-secret"

MIN_SECRET_LENGTH = 32


@dataclass(frozen=True)
class AuthSettings:
    """Configurações de emissão e validação de tokens.

    Attributes:
        jwt_secret: Segredo HMAC de assinatura
        jwt_algorithm: Algoritmo de assinatura
        token_ttl_days: Validade do token em dias
    """

    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = 7

    def validate(self, environment: str) -> list[str]:
        """Valida configurações de autenticação.

        Args:
            environment: Ambiente atual; fora de development o segredo de
                desenvolvimento não é aceito.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.jwt_secret:
            errors.append("JWT_SECRET não configurado")
        elif environment not in ("development", "test"):
            if self.jwt_secret == DEV_JWT_SECRET:
                errors.append("JWT_SECRET de desenvolvimento em uso")
            elif len(self.jwt_secret) < MIN_SECRET_LENGTH:
                errors.append(f"JWT_SECRET deve ter ao menos {MIN_SECRET_LENGTH} caracteres")

        if self.jwt_algorithm not in {"HS256", "HS384", "HS512"}:
            errors.append(f"JWT_ALGORITHM não suportado: {self.jwt_algorithm}")

        if self.token_ttl_days < 1:
            errors.append(f"JWT_EXPIRES_DAYS inválido: {self.token_ttl_days}")

        return errors


def _load_auth_from_env() -> AuthSettings:
    """Carrega AuthSettings de variáveis de ambiente."""
    return AuthSettings(
        jwt_secret=os.getenv("JWT_SECRET", DEV_JWT_SECRET),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        token_ttl_days=int(os.getenv("JWT_EXPIRES_DAYS", "7")),
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Retorna instância cacheada de AuthSettings."""
    return _load_auth_from_env()
