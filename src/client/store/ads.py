"""Slice de anúncios: listagens, busca, anúncio corrente e CRUD."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from client.store.actions import FULFILLED, PENDING, REJECTED, Action, Slice, split_type
from client.store.thunk import run_thunk

if TYPE_CHECKING:
    from client.api.ads import AdsApi
    from client.api.base import Result
    from client.store.core import Store

NAME = "ads"

FETCH_ALL = "ads/fetchAll"
SEARCH = "ads/search"
FETCH_MINE = "ads/fetchMine"
FETCH_ONE = "ads/fetchOne"
CREATE = "ads/create"
UPDATE = "ads/update"
DELETE = "ads/delete"
CLEAR_CURRENT = "ads/clearCurrent"

CREATED_MESSAGE = "Anúncio criado com sucesso!"
UPDATED_MESSAGE = "Anúncio atualizado!"
DELETED_MESSAGE = "Anúncio removido!"

_THUNKS = frozenset({FETCH_ALL, SEARCH, FETCH_MINE, FETCH_ONE, CREATE, UPDATE, DELETE})

AdDict = dict[str, Any]


@dataclass(frozen=True, slots=True)
class AdsState:
    ads: tuple[AdDict, ...] = ()
    user_ads: tuple[AdDict, ...] = ()
    current: AdDict | None = None
    loading: bool = False
    search_loading: bool = False
    error: str | None = None


def _replace_ad(ads: tuple[AdDict, ...], updated: AdDict) -> tuple[AdDict, ...]:
    return tuple(updated if ad.get("id") == updated.get("id") else ad for ad in ads)


def _without(ads: tuple[AdDict, ...], ad_id: str) -> tuple[AdDict, ...]:
    return tuple(ad for ad in ads if ad.get("id") != ad_id)


def _fulfilled(state: AdsState, thunk: str, action: Action) -> AdsState:
    payload = action.payload
    done = replace(state, loading=False, search_loading=False, error=None)
    if thunk in (FETCH_ALL, SEARCH):
        return replace(done, ads=tuple(payload))
    if thunk == FETCH_MINE:
        return replace(done, user_ads=tuple(payload))
    if thunk == FETCH_ONE:
        return replace(done, current=payload)
    if thunk == CREATE:
        return replace(
            done,
            ads=(*state.ads, payload),
            user_ads=(*state.user_ads, payload),
            current=payload,
        )
    if thunk == UPDATE:
        return replace(
            done,
            ads=_replace_ad(state.ads, payload),
            user_ads=_replace_ad(state.user_ads, payload),
            current=payload,
        )
    # DELETE: meta é o id removido
    current = None if state.current and state.current.get("id") == action.meta else state.current
    return replace(
        done,
        ads=_without(state.ads, action.meta),
        user_ads=_without(state.user_ads, action.meta),
        current=current,
    )


def reduce(state: AdsState, action: Action) -> AdsState:
    if action.type == CLEAR_CURRENT:
        return state if state.current is None else replace(state, current=None)

    thunk, phase = split_type(action.type)
    if thunk not in _THUNKS:
        return state
    if phase == PENDING:
        if thunk == SEARCH:
            return replace(state, search_loading=True, error=None)
        return replace(state, loading=True, error=None)
    if phase == REJECTED:
        return replace(state, loading=False, search_loading=False, error=action.payload)
    if phase == FULFILLED:
        return _fulfilled(state, thunk, action)
    return state


SLICE = Slice(NAME, AdsState(), reduce)


async def fetch_ads(store: Store, api: AdsApi) -> Result[list[AdDict]]:
    return await run_thunk(store, FETCH_ALL, api.list_all())


async def search_ads(store: Store, api: AdsApi, query: str) -> Result[list[AdDict]]:
    return await run_thunk(store, SEARCH, api.search(query), meta=query)


async def fetch_my_ads(store: Store, api: AdsApi) -> Result[list[AdDict]]:
    return await run_thunk(store, FETCH_MINE, api.list_mine())


async def fetch_ad(store: Store, api: AdsApi, ad_id: str) -> Result[AdDict]:
    return await run_thunk(store, FETCH_ONE, api.get(ad_id), meta=ad_id)


async def create_ad(store: Store, api: AdsApi, fields: dict[str, Any]) -> Result[AdDict]:
    return await run_thunk(store, CREATE, api.create(fields), success_message=CREATED_MESSAGE)


async def update_ad(
    store: Store,
    api: AdsApi,
    ad_id: str,
    fields: dict[str, Any],
) -> Result[AdDict]:
    return await run_thunk(
        store, UPDATE, api.update(ad_id, fields), meta=ad_id, success_message=UPDATED_MESSAGE
    )


async def delete_ad(store: Store, api: AdsApi, ad_id: str) -> Result[AdDict]:
    return await run_thunk(
        store, DELETE, api.delete(ad_id), meta=ad_id, success_message=DELETED_MESSAGE
    )
