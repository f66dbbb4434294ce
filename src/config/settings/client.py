"""Settings do cliente (SPA headless).

Endereço da API, serviço de consulta de CEP e tempos de notificação.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

VIACEP_URL = "https://viacep.com.br/ws"


@dataclass(frozen=True)
class ClientSettings:
    """Configurações do cliente.

    Attributes:
        api_base_url: URL base da API (sem /api)
        zipcode_lookup_url: URL base do serviço de CEP
        zipcode_timeout_seconds: Timeout da consulta de CEP
        notification_timeout_seconds: Tempo até fechar notificações comuns
    """

    api_base_url: str = "http://localhost:3000"
    zipcode_lookup_url: str = VIACEP_URL
    zipcode_timeout_seconds: float = 5.0
    notification_timeout_seconds: float = 5.0

    def validate(self) -> list[str]:
        """Valida configurações do cliente."""
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"ONDE_TEM_API_URL inválida: {self.api_base_url}")

        if self.zipcode_timeout_seconds <= 0:
            errors.append("ZIPCODE_TIMEOUT_SECONDS deve ser positivo")

        if self.notification_timeout_seconds <= 0:
            errors.append("NOTIFICATION_TIMEOUT_SECONDS deve ser positivo")

        return errors


def _load_client_from_env() -> ClientSettings:
    """Carrega ClientSettings de variáveis de ambiente."""
    return ClientSettings(
        api_base_url=os.getenv("ONDE_TEM_API_URL", "http://localhost:3000").rstrip("/"),
        zipcode_lookup_url=os.getenv("ZIPCODE_LOOKUP_URL", VIACEP_URL).rstrip("/"),
        zipcode_timeout_seconds=float(os.getenv("ZIPCODE_TIMEOUT_SECONDS", "5.0")),
        notification_timeout_seconds=float(os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "5.0")),
    )


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Retorna instância cacheada de ClientSettings."""
    return _load_client_from_env()
