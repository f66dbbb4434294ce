"""Settings do banco relacional.

O acesso é feito via SQLAlchemy async; a URL define o driver
(`sqlite+aiosqlite` em desenvolvimento, `postgresql+asyncpg` em produção).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./onde_tem.db"


@dataclass(frozen=True)
class DatabaseSettings:
    """Configurações de conexão.

    Attributes:
        url: URL SQLAlchemy (async driver)
        pool_size: Tamanho do pool (ignorado para SQLite)
        echo: Loga SQL emitido (apenas debug)
    """

    url: str = DEFAULT_DATABASE_URL
    pool_size: int = 5
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        """Retorna True se a URL aponta para SQLite."""
        return self.url.startswith("sqlite")

    def validate(self, environment: str) -> list[str]:
        """Valida configurações do banco.

        Args:
            environment: Ambiente atual (SQLite não é aceito em produção).

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.url:
            errors.append("DATABASE_URL não configurada")
        elif "+" not in self.url.split("://", 1)[0]:
            errors.append("DATABASE_URL deve indicar um driver async (ex: postgresql+asyncpg)")

        if self.pool_size < 1:
            errors.append(f"DATABASE_POOL_SIZE inválido: {self.pool_size}")

        if environment == "production" and self.is_sqlite:
            errors.append("SQLite não é suportado em produção")

        return errors


def _load_database_from_env() -> DatabaseSettings:
    """Carrega DatabaseSettings de variáveis de ambiente."""
    return DatabaseSettings(
        url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        pool_size=int(os.getenv("DATABASE_POOL_SIZE", "5")),
        echo=os.getenv("DATABASE_ECHO", "").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_database_settings() -> DatabaseSettings:
    """Retorna instância cacheada de DatabaseSettings."""
    return _load_database_from_env()
