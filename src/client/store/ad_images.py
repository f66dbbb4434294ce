"""Slice de imagens do anúncio em edição/visualização."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from client.store.actions import FULFILLED, PENDING, REJECTED, Action, Slice, split_type
from client.store.thunk import run_thunk

if TYPE_CHECKING:
    from client.api.ads import AdsApi, StagedFile
    from client.api.base import Result
    from client.store.core import Store

NAME = "ad_images"

FETCH = "adImages/fetch"
UPLOAD = "adImages/upload"
DELETE = "adImages/delete"
CLEAR = "adImages/clear"

_THUNKS = frozenset({FETCH, UPLOAD, DELETE})


@dataclass(frozen=True, slots=True)
class AdImagesState:
    """Imagens persistidas de `ad_id` (nomes de arquivo, na ordem do servidor)."""

    ad_id: str | None = None
    images: tuple[str, ...] = ()
    loading: bool = False
    error: str | None = None


def _fulfilled(state: AdImagesState, thunk: str, action: Action) -> AdImagesState:
    done = replace(state, loading=False, error=None)
    if thunk == FETCH:
        return replace(done, ad_id=action.meta, images=tuple(action.payload))

    ad_id = action.meta["ad_id"]
    images = state.images if state.ad_id in (None, ad_id) else ()
    if thunk == UPLOAD:
        filename = action.payload["filename"]
        if filename not in images:
            images = (*images, filename)
        return replace(done, ad_id=ad_id, images=images)

    # DELETE: idempotente, nome ausente deixa a lista igual
    filename = action.meta["filename"]
    return replace(done, ad_id=ad_id, images=tuple(i for i in images if i != filename))


def reduce(state: AdImagesState, action: Action) -> AdImagesState:
    if action.type == CLEAR:
        return AdImagesState()

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


SLICE = Slice(NAME, AdImagesState(), reduce)


def clear_images() -> Action:
    return Action(CLEAR)


async def fetch_images(store: Store, api: AdsApi, ad_id: str) -> Result[list[str]]:
    return await run_thunk(store, FETCH, api.list_images(ad_id), meta=ad_id, notify_error=False)


async def upload_image(
    store: Store,
    api: AdsApi,
    ad_id: str,
    file: StagedFile,
) -> Result[dict[str, Any]]:
    return await run_thunk(
        store,
        UPLOAD,
        api.upload_image(ad_id, file),
        meta={"ad_id": ad_id, "filename": file.filename},
        notify_error=False,
    )


async def delete_image(
    store: Store,
    api: AdsApi,
    ad_id: str,
    filename: str,
) -> Result[dict[str, Any]]:
    return await run_thunk(
        store,
        DELETE,
        api.delete_image(ad_id, filename),
        meta={"ad_id": ad_id, "filename": filename},
        notify_error=False,
    )
