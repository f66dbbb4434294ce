"""Slice de favoritos do usuário logado."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from client.store.actions import FULFILLED, PENDING, REJECTED, Action, Slice, split_type
from client.store.auth import LOGOUT
from client.store.thunk import run_thunk

if TYPE_CHECKING:
    from client.api.base import Result
    from client.api.favorites import FavoritesApi
    from client.store.core import Store

NAME = "favorites"

FETCH = "favorites/fetch"
FETCH_IDS = "favorites/fetchIds"
ADD = "favorites/add"
REMOVE = "favorites/remove"

ADDED_MESSAGE = "Anúncio adicionado aos favoritos!"
REMOVED_MESSAGE = "Anúncio removido dos favoritos!"

_THUNKS = frozenset({FETCH, FETCH_IDS, ADD, REMOVE})


@dataclass(frozen=True, slots=True)
class FavoritesState:
    ads: tuple[dict[str, Any], ...] = ()
    ids: tuple[str, ...] = ()
    loading: bool = False
    error: str | None = None

    def is_favorite(self, ad_id: str) -> bool:
        return ad_id in self.ids


def _fulfilled(state: FavoritesState, thunk: str, action: Action) -> FavoritesState:
    done = replace(state, loading=False, error=None)
    if thunk == FETCH:
        ads = tuple(action.payload)
        return replace(done, ads=ads, ids=tuple(ad["id"] for ad in ads))
    if thunk == FETCH_IDS:
        return replace(done, ids=tuple(action.payload))
    ad_id = action.meta
    if thunk == ADD:
        return replace(done, ids=state.ids if ad_id in state.ids else (*state.ids, ad_id))
    return replace(
        done,
        ids=tuple(i for i in state.ids if i != ad_id),
        ads=tuple(ad for ad in state.ads if ad.get("id") != ad_id),
    )


def reduce(state: FavoritesState, action: Action) -> FavoritesState:
    if action.type == LOGOUT:
        return FavoritesState()

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


SLICE = Slice(NAME, FavoritesState(), reduce)


async def fetch_favorites(store: Store, api: FavoritesApi) -> Result[list[dict[str, Any]]]:
    return await run_thunk(store, FETCH, api.list_ads())


async def fetch_favorite_ids(store: Store, api: FavoritesApi) -> Result[list[str]]:
    # Chamada de fundo: sem notificação de erro
    return await run_thunk(store, FETCH_IDS, api.list_ids(), notify_error=False)


async def add_favorite(store: Store, api: FavoritesApi, ad_id: str) -> Result[dict[str, Any]]:
    return await run_thunk(
        store, ADD, api.add(ad_id), meta=ad_id, success_message=ADDED_MESSAGE
    )


async def remove_favorite(store: Store, api: FavoritesApi, ad_id: str) -> Result[dict[str, Any]]:
    return await run_thunk(
        store, REMOVE, api.remove(ad_id), meta=ad_id, success_message=REMOVED_MESSAGE
    )
