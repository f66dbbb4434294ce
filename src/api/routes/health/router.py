"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.infra.stores.database import ping

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE = "onde-tem"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/health/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: banco respondendo e diretório de upload gravável."""
    container = getattr(request.app.state, "container", None)
    database_check, storage_check = await asyncio.gather(
        _check_database(getattr(container, "engine", None)),
        _check_storage(getattr(container, "storage", None)),
    )

    ready = database_check.status == "ok" and storage_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "database": database_check.as_dict(),
            "storage": storage_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_failed", extra={"checks": payload["checks"]})
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_database(engine: Any | None) -> DependencyCheck:
    if engine is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(ping(engine), timeout=3.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


async def _check_storage(storage: Any | None) -> DependencyCheck:
    if storage is None:
        return DependencyCheck(status="failed", error="not_configured")
    root = storage.root
    writable = await asyncio.to_thread(lambda: root.is_dir() and os.access(root, os.W_OK))
    if not writable:
        return DependencyCheck(status="failed", error="not_writable")
    return DependencyCheck(status="ok")
