"""Slice de autenticação: usuário logado e token."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from client.api.base import Ok
from client.store.actions import FULFILLED, PENDING, REJECTED, Action, Slice, split_type
from client.store.thunk import run_thunk

if TYPE_CHECKING:
    from client.api.auth import AuthApi
    from client.api.base import Result
    from client.store.core import Store

NAME = "auth"

LOGIN = "auth/login"
FETCH_ME = "auth/fetchMe"
LOGOUT = "auth/logout"

# Atualização do próprio perfil reflete no usuário logado
_USER_UPDATED = "users/update/fulfilled"

_THUNKS = frozenset({LOGIN, FETCH_ME})


@dataclass(frozen=True, slots=True)
class AuthState:
    user: dict[str, Any] | None = None
    token: str | None = None
    loading: bool = False
    error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)


def reduce(state: AuthState, action: Action) -> AuthState:
    if action.type == LOGOUT:
        return AuthState()
    if action.type == _USER_UPDATED:
        if state.user and state.user.get("id") == action.payload.get("id"):
            return replace(state, user=action.payload)
        return state

    thunk, phase = split_type(action.type)
    if thunk not in _THUNKS:
        return state
    if phase == PENDING:
        return replace(state, loading=True, error=None)
    if phase == REJECTED:
        return replace(state, loading=False, error=action.payload)
    if phase == FULFILLED:
        if thunk == LOGIN:
            return replace(
                state,
                loading=False,
                user=action.payload["user"],
                token=action.payload["token"],
            )
        return replace(state, loading=False, user=action.payload)
    return state


SLICE = Slice(NAME, AuthState(), reduce)


async def login(store: Store, api: AuthApi, email: str, password: str) -> Result[dict[str, Any]]:
    """Autentica e passa a enviar o token nas chamadas seguintes."""
    result = await run_thunk(store, LOGIN, api.login(email, password))
    if isinstance(result, Ok):
        api.client.set_token(result.value["token"])
    return result


async def fetch_current_user(store: Store, api: AuthApi) -> Result[dict[str, Any]]:
    return await run_thunk(store, FETCH_ME, api.me())


async def logout(store: Store, api: AuthApi) -> Result[dict[str, Any]]:
    """Encerra a sessão local mesmo se o servidor não responder."""
    result = await api.logout()
    api.client.set_token(None)
    store.dispatch(Action(LOGOUT))
    return result
