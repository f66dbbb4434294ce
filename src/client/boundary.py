"""Fronteira de erro do cliente.

Executa uma tela/ação e, diante de uma exceção inesperada (erro de
programação, não falha de API), registra o erro e expõe um estado de
fallback com "tentar novamente" em vez de derrubar o cliente.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

FALLBACK_TITLE = "Oops! Algo deu errado"
FALLBACK_MESSAGE = (
    "Encontramos um problema inesperado. Por favor, recarregue a página "
    "ou tente novamente mais tarde."
)


@dataclass(frozen=True, slots=True)
class Fallback:
    title: str
    message: str
    detail: str | None = None


class ErrorBoundary(Generic[T]):
    """Envolve `render` (síncrono ou assíncrono).

    Args:
        render: Função executada por `run()`
        debug: Inclui o texto da exceção no fallback
    """

    def __init__(self, render: Callable[[], T | Awaitable[T]], *, debug: bool = False) -> None:
        self._render = render
        self._debug = debug
        self._error: Exception | None = None

    @property
    def has_error(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> Exception | None:
        return self._error

    @property
    def fallback(self) -> Fallback | None:
        if self._error is None:
            return None
        detail = f"{type(self._error).__name__}: {self._error}" if self._debug else None
        return Fallback(FALLBACK_TITLE, FALLBACK_MESSAGE, detail)

    async def run(self) -> T | None:
        """Executa `render`; em erro retorna None e passa a exibir o fallback."""
        if self._error is not None:
            return None
        try:
            result = self._render()
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.exception("error_boundary_caught", extra={"error_type": type(exc).__name__})
            self._error = exc
            return None
        return result

    def reset(self) -> None:
        """Sai do fallback sem executar nada."""
        self._error = None

    async def retry(self) -> T | None:
        self.reset()
        return await self.run()
