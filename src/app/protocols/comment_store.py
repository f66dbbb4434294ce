"""Protocolo de persistência de comentários."""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.comment import Comment


class CommentStoreProtocol(ABC):
    """Contrato assíncrono para comentários de anúncios."""

    @abstractmethod
    async def create(self, ad_id: str, user_id: str, content: str) -> Comment: ...

    @abstractmethod
    async def get(self, comment_id: str) -> Comment | None: ...

    @abstractmethod
    async def list_by_ad(self, ad_id: str) -> list[Comment]:
        """Comentários do anúncio com dados do autor, mais antigos primeiro."""

    @abstractmethod
    async def count_by_ad(self, ad_id: str) -> int: ...

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[Comment]:
        """Comentários do usuário com título do anúncio, mais recentes primeiro."""

    @abstractmethod
    async def update(self, comment_id: str, content: str) -> Comment | None: ...

    @abstractmethod
    async def delete(self, comment_id: str) -> bool: ...
