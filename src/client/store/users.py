"""Slice de usuários: listagem, perfil e cadastro."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from client.store.actions import FULFILLED, PENDING, REJECTED, Action, Slice, split_type
from client.store.thunk import run_thunk

if TYPE_CHECKING:
    from client.api.ads import StagedFile
    from client.api.base import Result
    from client.api.users import UsersApi
    from client.store.core import Store

NAME = "users"

FETCH_ALL = "users/fetchAll"
FETCH_ONE = "users/fetchOne"
CREATE = "users/create"
UPDATE = "users/update"
DELETE = "users/delete"

CREATED_MESSAGE = "Usuário criado com sucesso!"
UPDATED_MESSAGE = "Usuário atualizado com sucesso!"
DELETED_MESSAGE = "Usuário removido com sucesso!"

_THUNKS = frozenset({FETCH_ALL, FETCH_ONE, CREATE, UPDATE, DELETE})

UserDict = dict[str, Any]


@dataclass(frozen=True, slots=True)
class UsersState:
    users: tuple[UserDict, ...] = ()
    selected: UserDict | None = None
    created_user_id: str | None = None
    loading: bool = False
    error: str | None = None


def _fulfilled(state: UsersState, thunk: str, action: Action) -> UsersState:
    done = replace(state, loading=False, error=None)
    payload = action.payload
    if thunk == FETCH_ALL:
        return replace(done, users=tuple(payload))
    if thunk == FETCH_ONE:
        return replace(done, selected=payload)
    if thunk == CREATE:
        return replace(done, created_user_id=payload.get("userId"))
    if thunk == UPDATE:
        users = tuple(payload if u.get("id") == payload.get("id") else u for u in state.users)
        return replace(done, users=users, selected=payload)
    # DELETE
    selected = None if state.selected and state.selected.get("id") == action.meta else state.selected
    return replace(
        done,
        users=tuple(u for u in state.users if u.get("id") != action.meta),
        selected=selected,
    )


def reduce(state: UsersState, action: Action) -> UsersState:
    thunk, phase = split_type(action.type)
    if thunk not in _THUNKS:
        return state
    if phase == PENDING:
        return replace(state, loading=True, error=None)
    if phase == REJECTED:
        return replace(state, loading=False, error=action.payload)
    if phase == FULFILLED:
        return _fulfilled(state, thunk, action)
    return state


SLICE = Slice(NAME, UsersState(), reduce)


async def fetch_users(store: Store, api: UsersApi) -> Result[list[UserDict]]:
    return await run_thunk(store, FETCH_ALL, api.list_all())


async def fetch_user(store: Store, api: UsersApi, user_id: str) -> Result[UserDict]:
    return await run_thunk(store, FETCH_ONE, api.get(user_id), meta=user_id)


async def create_user(
    store: Store,
    api: UsersApi,
    fields: Mapping[str, Any],
    photo: StagedFile | None = None,
) -> Result[UserDict]:
    return await run_thunk(
        store, CREATE, api.create(fields, photo), success_message=CREATED_MESSAGE
    )


async def update_user(
    store: Store,
    api: UsersApi,
    user_id: str,
    fields: Mapping[str, Any],
    photo: StagedFile | None = None,
) -> Result[UserDict]:
    return await run_thunk(
        store,
        UPDATE,
        api.update(user_id, fields, photo),
        meta=user_id,
        success_message=UPDATED_MESSAGE,
    )


async def delete_user(store: Store, api: UsersApi, user_id: str) -> Result[UserDict]:
    return await run_thunk(
        store, DELETE, api.delete(user_id), meta=user_id, success_message=DELETED_MESSAGE
    )
