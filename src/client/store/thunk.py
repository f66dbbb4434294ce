"""Execução de chamadas assíncronas com as fases pending/fulfilled/rejected."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, TypeVar

from client.api.base import Err, Result
from client.store.actions import FULFILLED, PENDING, REJECTED, Action
from client.store.notification import NotificationType

if TYPE_CHECKING:
    from client.store.core import Store

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_thunk(
    store: Store,
    type_prefix: str,
    call: Awaitable[Result[T]],
    *,
    meta: Any = None,
    success_message: str | None = None,
    notify_error: bool = True,
) -> Result[T]:
    """Despacha pending, aguarda a chamada e despacha fulfilled ou rejected.

    Args:
        store: Store de destino
        type_prefix: Prefixo das ações (ex: "ads/create")
        call: Chamada ao wrapper da API (uma única requisição)
        meta: Argumentos repassados às três ações
        success_message: Notificação de sucesso, se houver
        notify_error: Exibe a mensagem de erro como notificação

    Returns:
        O próprio Result da chamada.
    """
    store.dispatch(Action(f"{type_prefix}/{PENDING}", meta=meta))
    result = await call

    if isinstance(result, Err):
        logger.info(
            "thunk_rejected",
            extra={"action": type_prefix, "kind": str(result.error.kind)},
        )
        store.dispatch(Action(f"{type_prefix}/{REJECTED}", result.error.message, meta))
        if notify_error:
            store.notifier.show(result.error.message, NotificationType.ERROR)
        return result

    store.dispatch(Action(f"{type_prefix}/{FULFILLED}", result.value, meta))
    if success_message:
        store.notifier.show(success_message, NotificationType.SUCCESS)
    return result
