"""Logging estruturado do Onde Tem?.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="onde_tem")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("ad_created", extra={"ad_id": ad_id})

Campos presentes em todo log: correlation_id, service, level, logger,
message e asctime. Nunca registrar senhas, tokens ou e-mails completos.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
