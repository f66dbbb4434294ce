"""Slice de notificação: mensagem transitória exibida ao usuário.

Notificações não críticas somem sozinhas após o timeout; `critical`
permanece até `clear()`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from client.store.actions import Action, Slice

logger = logging.getLogger(__name__)

NAME = "notification"
SHOW = "notification/show"
CLEAR = "notification/clear"


class NotificationType(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class NotificationState:
    message: str | None = None
    type: NotificationType | None = None

    @property
    def visible(self) -> bool:
        return bool(self.message)


def reduce(state: NotificationState, action: Action) -> NotificationState:
    if action.type == SHOW:
        return action.payload
    if action.type == CLEAR:
        return state if not state.visible else NotificationState()
    return state


class Notifier:
    """Exibe notificações e agenda a remoção automática no event loop."""

    def __init__(
        self,
        dispatch: Callable[[Action], None],
        *,
        timeout_seconds: float = 5.0,
    ) -> None:
        self._dispatch = dispatch
        self._timeout_seconds = timeout_seconds
        self._timer: asyncio.TimerHandle | None = None

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    def show(self, message: str, type: NotificationType = NotificationType.INFO) -> None:
        """Exibe `message`; uma nova notificação cancela o timer anterior."""
        self._cancel_timer()
        self._dispatch(Action(SHOW, NotificationState(message=message, type=type)))
        logger.debug("notification_shown", extra={"notification_type": str(type)})

        if type is NotificationType.CRITICAL:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("notification_timer_unavailable")
            return
        self._timer = loop.call_later(self._timeout_seconds, self._expire)

    def clear(self) -> None:
        self._cancel_timer()
        self._dispatch(Action(CLEAR))

    def _expire(self) -> None:
        self._timer = None
        self._dispatch(Action(CLEAR))

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


SLICE = Slice(NAME, NotificationState(), reduce)
