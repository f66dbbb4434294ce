"""Formatter JSON com os campos obrigatórios de log."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de saída:
        {"asctime": "2026-03-10 10:30:00,123", "level": "INFO",
         "logger": "api.routes.ads.router", "message": "ad_created",
         "correlation_id": "abc-123", "service": "onde_tem", "ad_id": "..."}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
