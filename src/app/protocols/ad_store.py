"""Protocolo de persistência de anúncios e imagens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from app.domain.ad import Ad


class AdStoreProtocol(ABC):
    """Contrato assíncrono para anúncios e a tabela de imagens.

    Todo Ad retornado traz `images` preenchido.
    """

    @abstractmethod
    async def list_all(self) -> list[Ad]:
        """Todos os anúncios, mais recentes primeiro."""

    @abstractmethod
    async def search(self, term: str) -> list[Ad]:
        """Busca sem diferenciar maiúsculas em título, resumo, descrição, tags e cidade."""

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[Ad]:
        """Anúncios do usuário ordenados por título."""

    @abstractmethod
    async def get(self, ad_id: str) -> Ad | None: ...

    @abstractmethod
    async def create(self, user_id: str, fields: dict[str, Any]) -> Ad: ...

    @abstractmethod
    async def update(self, ad_id: str, fields: dict[str, Any]) -> Ad | None: ...

    @abstractmethod
    async def delete(self, ad_id: str) -> bool: ...

    @abstractmethod
    async def list_images(self, ad_id: str) -> list[str]: ...

    @abstractmethod
    async def list_user_image_filenames(self, user_id: str) -> list[str]:
        """Arquivos de imagem de todos os anúncios do usuário."""

    @abstractmethod
    async def add_image(self, ad_id: str, filename: str, *, limit: int) -> None:
        """Registra imagem. Levanta ImageLimitError se o anúncio já tem `limit`."""

    @abstractmethod
    async def remove_image(self, ad_id: str, filename: str) -> bool:
        """Remove registro de imagem; False se já não existia."""
