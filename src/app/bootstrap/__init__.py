"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e monta o
container de dependências.

Uso:
    from app.bootstrap import initialize_app, get_container

    initialize_app()
    container = get_container()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.bootstrap.dependencies import AppContainer, create_container
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_database_settings,
    get_storage_settings,
)

SERVICE_NAME = "onde_tem"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings do servidor."""
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"database: {error}" for error in get_database_settings().validate(base.environment))
    errors.extend(f"auth: {error}" for error in get_auth_settings().validate(base.environment))
    errors.extend(f"storage: {error}" for error in get_storage_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` apenas registra alerta.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_container() -> AppContainer:
    """Container do processo (singleton), montado a partir do ambiente."""
    return create_container()


__all__ = [
    "SERVICE_NAME",
    "AppContainer",
    "collect_settings_errors",
    "create_container",
    "get_container",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
