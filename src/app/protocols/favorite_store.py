"""Protocolo de persistência de favoritos."""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.ad import Ad


class FavoriteStoreProtocol(ABC):
    """Contrato assíncrono para a relação usuário ↔ anúncio favorito."""

    @abstractmethod
    async def add(self, user_id: str, ad_id: str) -> bool:
        """Adiciona favorito; False se já existia."""

    @abstractmethod
    async def remove(self, user_id: str, ad_id: str) -> bool:
        """Remove favorito; False se não existia."""

    @abstractmethod
    async def exists(self, user_id: str, ad_id: str) -> bool: ...

    @abstractmethod
    async def list_ids(self, user_id: str) -> list[str]: ...

    @abstractmethod
    async def list_ads(self, user_id: str) -> list[Ad]:
        """Anúncios favoritados, os mais recentes primeiro."""
