"""Slice de comentários: por anúncio, contagens e comentários do usuário."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from client.store.actions import FULFILLED, PENDING, REJECTED, Action, Slice, split_type
from client.store.thunk import run_thunk

if TYPE_CHECKING:
    from client.api.base import Result
    from client.api.comments import CommentsApi
    from client.store.core import Store

NAME = "comments"

FETCH_FOR_AD = "comments/fetchForAd"
FETCH_COUNT = "comments/fetchCount"
FETCH_MINE = "comments/fetchMine"
CREATE = "comments/create"
UPDATE = "comments/update"
DELETE = "comments/delete"

_MUTATIONS = frozenset({CREATE, UPDATE, DELETE})
_THUNKS = frozenset({FETCH_FOR_AD, FETCH_COUNT, FETCH_MINE}) | _MUTATIONS

CommentDict = dict[str, Any]


@dataclass(frozen=True, slots=True)
class CommentsState:
    """Comentários indexados por anúncio.

    Os mapas nunca são alterados no lugar; cada ação cria cópias.
    """

    by_ad: Mapping[str, tuple[CommentDict, ...]] = field(default_factory=dict)
    counts: Mapping[str, int] = field(default_factory=dict)
    user_comments: tuple[CommentDict, ...] = ()
    loading: bool = False
    submitting: bool = False
    error: str | None = None

    def for_ad(self, ad_id: str) -> tuple[CommentDict, ...]:
        return self.by_ad.get(ad_id, ())

    def count_for(self, ad_id: str) -> int:
        return self.counts.get(ad_id, 0)


def _replace_comment(comments: tuple[CommentDict, ...], updated: CommentDict) -> tuple[CommentDict, ...]:
    # O corpo do PUT não traz os campos de join; preserva os já carregados
    return tuple(
        {**c, **updated} if c.get("id") == updated.get("id") else c for c in comments
    )


def _delete(state: CommentsState, comment_id: str) -> CommentsState:
    by_ad: dict[str, tuple[CommentDict, ...]] = {}
    counts = dict(state.counts)
    for ad_id, comments in state.by_ad.items():
        kept = tuple(c for c in comments if c.get("id") != comment_id)
        if len(kept) != len(comments):
            counts[ad_id] = max(0, counts.get(ad_id, 1) - 1)
        by_ad[ad_id] = kept
    return replace(
        state,
        by_ad=by_ad,
        counts=counts,
        user_comments=tuple(c for c in state.user_comments if c.get("id") != comment_id),
    )


def _fulfilled(state: CommentsState, thunk: str, action: Action) -> CommentsState:
    done = replace(state, loading=False, submitting=False, error=None)
    payload = action.payload
    if thunk == FETCH_FOR_AD:
        comments = tuple(payload)
        return replace(
            done,
            by_ad={**state.by_ad, action.meta: comments},
            counts={**state.counts, action.meta: len(comments)},
        )
    if thunk == FETCH_COUNT:
        return replace(done, counts={**state.counts, action.meta: payload})
    if thunk == FETCH_MINE:
        return replace(done, user_comments=tuple(payload))
    if thunk == CREATE:
        ad_id = action.meta
        return replace(
            done,
            by_ad={**state.by_ad, ad_id: (*state.for_ad(ad_id), payload)},
            counts={**state.counts, ad_id: state.count_for(ad_id) + 1},
        )
    if thunk == UPDATE:
        return replace(
            done,
            by_ad={ad_id: _replace_comment(c, payload) for ad_id, c in state.by_ad.items()},
            user_comments=_replace_comment(state.user_comments, payload),
        )
    return _delete(done, action.meta)


def reduce(state: CommentsState, action: Action) -> CommentsState:
    thunk, phase = split_type(action.type)
    if thunk not in _THUNKS:
        return state
    if phase == PENDING:
        if thunk in _MUTATIONS:
            return replace(state, submitting=True, error=None)
        return replace(state, loading=True, error=None)
    if phase == REJECTED:
        return replace(state, loading=False, submitting=False, error=action.payload)
    if phase == FULFILLED:
        return _fulfilled(state, thunk, action)
    return state


SLICE = Slice(NAME, CommentsState(), reduce)


async def fetch_comments(store: Store, api: CommentsApi, ad_id: str) -> Result[list[CommentDict]]:
    return await run_thunk(store, FETCH_FOR_AD, api.list_for_ad(ad_id), meta=ad_id)


async def fetch_comment_count(store: Store, api: CommentsApi, ad_id: str) -> Result[int]:
    return await run_thunk(
        store, FETCH_COUNT, api.count_for_ad(ad_id), meta=ad_id, notify_error=False
    )


async def fetch_my_comments(store: Store, api: CommentsApi) -> Result[list[CommentDict]]:
    return await run_thunk(store, FETCH_MINE, api.list_mine())


async def create_comment(
    store: Store,
    api: CommentsApi,
    ad_id: str,
    content: str,
) -> Result[CommentDict]:
    return await run_thunk(store, CREATE, api.create(ad_id, content), meta=ad_id)


async def update_comment(
    store: Store,
    api: CommentsApi,
    comment_id: str,
    content: str,
) -> Result[CommentDict]:
    return await run_thunk(store, UPDATE, api.update(comment_id, content), meta=comment_id)


async def delete_comment(store: Store, api: CommentsApi, comment_id: str) -> Result[dict[str, Any]]:
    return await run_thunk(store, DELETE, api.delete(comment_id), meta=comment_id)
