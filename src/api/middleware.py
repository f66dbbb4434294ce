"""Middleware HTTP: correlation_id e métricas por requisição."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    record_latency,
    record_request,
    reset_correlation_id,
    set_correlation_id,
)


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Define correlation_id (header ou novo), devolve no response e mede latência."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    started_at = time.perf_counter()
    try:
        response = await call_next(request)
        correlation_id = get_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id

        # Template da rota (/api/ads/{ad_id}) evita uma série por id
        route = request.scope.get("route")
        path = getattr(route, "path", request.url.path)
        record_request(request.method, path, response.status_code)
        record_latency(
            "http",
            f"{request.method} {path}",
            (time.perf_counter() - started_at) * 1000,
            correlation_id,
        )
        return response
    finally:
        reset_correlation_id(token)
