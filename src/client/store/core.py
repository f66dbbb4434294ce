"""Store centralizado do cliente: slices, ações e assinantes.

Cada slice é um estado imutável mais um reducer puro. `dispatch` aplica
a ação em todos os reducers e notifica os assinantes quando algum estado
muda.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from client.store.actions import Action, Slice
from client.store.notification import Notifier

Listener = Callable[[], None]


class Store:
    """Contêiner dos slices do cliente."""

    def __init__(self, slices: Iterable[Slice], *, notification_timeout: float = 5.0) -> None:
        self._slices: dict[str, Slice] = {s.name: s for s in slices}
        self._state: dict[str, Any] = {name: s.initial for name, s in self._slices.items()}
        self._listeners: list[Listener] = []
        self.notifier = Notifier(self.dispatch, timeout_seconds=notification_timeout)

    def get_state(self) -> Mapping[str, Any]:
        """Visão somente leitura do estado de todos os slices."""
        return MappingProxyType(dict(self._state))

    def select(self, name: str) -> Any:
        return self._state[name]

    def dispatch(self, action: Action) -> None:
        changed = False
        for name, slice_ in self._slices.items():
            current = self._state[name]
            updated = slice_.reduce(current, action)
            if updated is not current:
                self._state[name] = updated
                changed = True

        if changed:
            for listener in list(self._listeners):
                listener()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registra um assinante; retorna a função que cancela o registro."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
