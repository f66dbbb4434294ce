"""Favoritos e comentários de anúncios."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.comment import MAX_COMMENT_LENGTH
from app.domain.errors import NotFoundError, PermissionDeniedError, ValidationFailedError
from app.services.ads import AD_NOT_FOUND
from app.services.sanitizer import sanitize_text

if TYPE_CHECKING:
    from app.domain.ad import Ad
    from app.domain.comment import Comment
    from app.domain.user import User
    from app.protocols.ad_store import AdStoreProtocol
    from app.protocols.comment_store import CommentStoreProtocol
    from app.protocols.favorite_store import FavoriteStoreProtocol

logger = logging.getLogger(__name__)

COMMENT_NOT_FOUND = "Comentário não encontrado"


class FavoriteService:
    """Favoritos do usuário autenticado."""

    def __init__(self, favorites: FavoriteStoreProtocol, ads: AdStoreProtocol) -> None:
        self._favorites = favorites
        self._ads = ads

    async def add(self, user: User, ad_id: str) -> bool:
        """Favorita o anúncio; False se já era favorito."""
        if await self._ads.get(ad_id) is None:
            raise NotFoundError(AD_NOT_FOUND)
        return await self._favorites.add(user.id, ad_id)

    async def remove(self, user: User, ad_id: str) -> bool:
        return await self._favorites.remove(user.id, ad_id)

    async def is_favorite(self, user: User, ad_id: str) -> bool:
        return await self._favorites.exists(user.id, ad_id)

    async def list_ids(self, user: User) -> list[str]:
        return await self._favorites.list_ids(user.id)

    async def list_ads(self, user: User) -> list[Ad]:
        return await self._favorites.list_ads(user.id)


class CommentService:
    """Comentários; só o autor edita ou remove."""

    def __init__(self, comments: CommentStoreProtocol, ads: AdStoreProtocol) -> None:
        self._comments = comments
        self._ads = ads

    async def create(self, author: User, ad_id: str, content: str) -> Comment:
        text = clean_comment(content)
        if await self._ads.get(ad_id) is None:
            raise NotFoundError(AD_NOT_FOUND)
        return await self._comments.create(ad_id, author.id, text)

    async def list_for_ad(self, ad_id: str) -> list[Comment]:
        return await self._comments.list_by_ad(ad_id)

    async def count_for_ad(self, ad_id: str) -> int:
        return await self._comments.count_by_ad(ad_id)

    async def list_for_user(self, user: User) -> list[Comment]:
        return await self._comments.list_by_user(user.id)

    async def update(self, actor: User, comment_id: str, content: str) -> Comment:
        text = clean_comment(content)
        await self._authored(actor, comment_id, "editar")
        updated = await self._comments.update(comment_id, text)
        if updated is None:
            raise NotFoundError(COMMENT_NOT_FOUND)
        return updated

    async def delete(self, actor: User, comment_id: str) -> None:
        await self._authored(actor, comment_id, "remover")
        if not await self._comments.delete(comment_id):
            raise NotFoundError(COMMENT_NOT_FOUND)
        logger.info("comment_deleted", extra={"comment_id": comment_id})

    async def _authored(self, actor: User, comment_id: str, verb: str) -> Comment:
        comment = await self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError(COMMENT_NOT_FOUND)
        if comment.user_id != actor.id:
            raise PermissionDeniedError(f"Você só pode {verb} seus próprios comentários")
        return comment


def clean_comment(content: str | None) -> str:
    """Sanitiza e valida o texto de um comentário."""
    text = sanitize_text(content or "")
    if not text:
        raise ValidationFailedError("O comentário não pode ser vazio")
    if len(text) > MAX_COMMENT_LENGTH:
        raise ValidationFailedError(
            f"O comentário deve ter no máximo {MAX_COMMENT_LENGTH} caracteres"
        )
    return text
