"""Métricas registradas como logs estruturados.

Não há backend de métricas: os eventos `metric_*` são agregados a partir
dos logs JSON.

Métricas:
- latency: tempo de execução por componente/operação
- request: contador de requisições HTTP por rota e status
- save_step: resultado de cada etapa do salvamento de anúncio no cliente
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "http", "zipcode_lookup")
        operation: Nome da operação (ex: "GET /api/ads")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_request(method: str, path: str, status_code: int) -> None:
    """Registra uma requisição HTTP concluída."""
    logger.info(
        "metric_request",
        extra={
            "metric_type": "request",
            "method": method,
            "path": path,
            "status_code": status_code,
            "status_class": f"{status_code // 100}xx",
        },
    )


def record_save_step(kind: str, status: str, ad_id: str | None = None) -> None:
    """Registra o resultado de uma etapa do salvamento de anúncio.

    Args:
        kind: Tipo da etapa (core, delete_image, upload_image)
        status: Resultado (done, failed)
        ad_id: Anúncio afetado, quando já persistido
    """
    level = logging.WARNING if status == "failed" else logging.INFO
    logger.log(
        level,
        "metric_save_step",
        extra={
            "metric_type": "save_step",
            "step_kind": kind,
            "step_status": status,
            "ad_id": ad_id,
        },
    )
