"""Cliente HTTP da API do Onde Tem? com resultados tipados.

Toda chamada devolve `Ok(valor)` ou `Err(ApiError)`; nenhuma exceção de
rede ou de status HTTP escapa para quem chama.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

NOT_AUTHENTICATED_MESSAGE = "Usuário não autenticado"
NETWORK_MESSAGE = "Erro de conexão. Verifique sua internet e tente novamente."
TIMEOUT_MESSAGE = "Tempo de resposta excedido. Tente novamente."
UNEXPECTED_MESSAGE = "Erro inesperado. Tente novamente."

DEFAULT_ERROR_MESSAGES: dict[int, str] = {
    400: "Dados inválidos. Verifique as informações e tente novamente.",
    401: "Você precisa fazer login para continuar.",
    403: "Você não tem permissão para realizar esta ação.",
    404: "O recurso solicitado não foi encontrado.",
    409: "Conflito nos dados. Este recurso já existe.",
    429: "Muitas tentativas. Aguarde um momento e tente novamente.",
    500: "Erro interno do servidor. Tente novamente mais tarde.",
    502: "Serviço temporariamente indisponível. Tente novamente em alguns minutos.",
    503: "Serviço temporariamente indisponível. Tente novamente em alguns minutos.",
    504: "Serviço temporariamente indisponível. Tente novamente em alguns minutos.",
}


class ApiErrorKind(StrEnum):
    """Categoria de falha de uma chamada à API."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    SERVER = "server"
    UNAVAILABLE = "unavailable"
    NETWORK = "network"
    TIMEOUT = "timeout"
    UNEXPECTED = "unexpected"


_KIND_BY_STATUS: dict[int, ApiErrorKind] = {
    400: ApiErrorKind.VALIDATION,
    401: ApiErrorKind.UNAUTHORIZED,
    403: ApiErrorKind.FORBIDDEN,
    404: ApiErrorKind.NOT_FOUND,
    409: ApiErrorKind.CONFLICT,
    422: ApiErrorKind.VALIDATION,
    429: ApiErrorKind.RATE_LIMITED,
    502: ApiErrorKind.UNAVAILABLE,
    503: ApiErrorKind.UNAVAILABLE,
    504: ApiErrorKind.UNAVAILABLE,
}


def default_error_message(status: int) -> str:
    """Mensagem amigável para um status HTTP sem corpo de erro."""
    if status in DEFAULT_ERROR_MESSAGES:
        return DEFAULT_ERROR_MESSAGES[status]
    if status >= 500:
        return "Erro no servidor. Tente novamente mais tarde."
    if status >= 400:
        return "Erro na solicitação. Verifique os dados e tente novamente."
    return UNEXPECTED_MESSAGE


def error_kind_for_status(status: int) -> ApiErrorKind:
    kind = _KIND_BY_STATUS.get(status)
    if kind is not None:
        return kind
    if status >= 500:
        return ApiErrorKind.SERVER
    return ApiErrorKind.UNEXPECTED


@dataclass(frozen=True, slots=True)
class ApiError:
    """Falha de uma chamada: categoria, mensagem para o usuário e status."""

    kind: ApiErrorKind
    message: str
    status: int | None = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    error: ApiError

    @property
    def is_ok(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self


Result = Ok[T] | Err


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        # JSON inválido ou corpo que não é texto
        return None


def _error_from_response(response: httpx.Response, body: Any) -> ApiError:
    message = None
    if isinstance(body, dict):
        candidate = body.get("error") or body.get("message")
        if isinstance(candidate, str) and candidate.strip():
            message = candidate
    return ApiError(
        kind=error_kind_for_status(response.status_code),
        message=message or default_error_message(response.status_code),
        status=response.status_code,
    )


class ApiClient:
    """Cliente assíncrono da API REST (`/api/...`).

    Guarda o token bearer corrente; chamadas marcadas com `auth=True`
    falham localmente, sem requisição, quando não há token.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )
        self._token: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    def set_token(self, token: str | None) -> None:
        self._token = token or None

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        auth: bool = False,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes, str]] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Result[Any]:
        """Executa uma requisição e converte a resposta em Result.

        Args:
            method: Verbo HTTP
            path: Caminho relativo à base (ex: /api/ads)
            auth: Exige token; sem ele retorna Err(UNAUTHORIZED) sem requisição
            json: Corpo JSON
            data: Campos de formulário (multipart quando há `files`)
            files: Arquivos multipart: nome -> (filename, bytes, content_type)
            params: Query string
        """
        if auth and not self._token:
            return Err(ApiError(ApiErrorKind.UNAUTHORIZED, NOT_AUTHENTICATED_MESSAGE))

        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}
        try:
            response = await self._client.request(
                method,
                path,
                json=json,
                data=data,
                files=files,
                params=params,
                headers=headers,
            )
        except httpx.TimeoutException:
            logger.warning("api_request_timeout", extra={"method": method, "path": path})
            return Err(ApiError(ApiErrorKind.TIMEOUT, TIMEOUT_MESSAGE))
        except httpx.RequestError as exc:
            logger.warning(
                "api_request_network_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            return Err(ApiError(ApiErrorKind.NETWORK, NETWORK_MESSAGE))

        body = _parse_body(response)
        if response.is_success:
            return Ok(body)

        error = _error_from_response(response, body)
        logger.info(
            "api_request_failed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "kind": str(error.kind),
            },
        )
        return Err(error)
