"""Ações, slices e fases das chamadas assíncronas (thunks) do store."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

PENDING = "pending"
FULFILLED = "fulfilled"
REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class Action:
    """Ação despachada para o store.

    Attributes:
        type: Ex: "ads/create/fulfilled"
        payload: Dados da resposta ou mensagem de erro
        meta: Argumentos da chamada (ex: id removido)
    """

    type: str
    payload: Any = None
    meta: Any = None


Reducer = Callable[[Any, Action], Any]


@dataclass(frozen=True, slots=True)
class Slice:
    """Partição nomeada do store: estado inicial e reducer puro."""

    name: str
    initial: Any
    reduce: Reducer


def split_type(action_type: str) -> tuple[str, str]:
    """Separa "ads/create/pending" em ("ads/create", "pending")."""
    prefix, _, phase = action_type.rpartition("/")
    if phase in (PENDING, FULFILLED, REJECTED):
        return prefix, phase
    return action_type, ""
