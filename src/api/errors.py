"""Conversão de exceções em respostas JSON `{"error": mensagem}`."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import AuthenticationError, OndeTemError

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "endpoint desconhecido"
INTERNAL_ERROR = "Erro interno do servidor"
INVALID_REQUEST = "Dados inválidos"


def error_response(status_code: int, message: str) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def handle_domain_error(request: Request, exc: OndeTemError) -> JSONResponse:
    level = logging.INFO if isinstance(exc, AuthenticationError) else logging.WARNING
    logger.log(
        level,
        "request_rejected",
        extra={
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )
    return error_response(exc.status_code, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = INVALID_REQUEST
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{INVALID_REQUEST}: {location}" if location else INVALID_REQUEST
    return error_response(400, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return error_response(404, UNKNOWN_ENDPOINT)
    if exc.status_code == 405:
        return error_response(405, "Método não permitido")
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        extra={"error_type": type(exc).__name__, "path": request.url.path},
    )
    return error_response(500, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Registra os handlers na app."""
    app.add_exception_handler(OndeTemError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
