"""Anúncios e suas imagens: regras de dono, limite e limpeza de arquivos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.errors import (
    ImageLimitError,
    InvalidUploadError,
    NotFoundError,
    PermissionDeniedError,
)
from app.infra.storage.local_storage import AD_IMAGES_FOLDER, is_safe_filename

if TYPE_CHECKING:
    from app.domain.ad import Ad
    from app.domain.upload import UploadedFile
    from app.domain.user import User
    from app.protocols.ad_store import AdStoreProtocol
    from app.protocols.image_storage import ImageStorageProtocol

logger = logging.getLogger(__name__)

AD_NOT_FOUND = "Anúncio não encontrado"


class AdService:
    """Orquestra store de anúncios e armazenamento de imagens.

    Args:
        ads: Store de anúncios
        storage: Armazenamento de arquivos
        max_images: Limite de imagens por anúncio
    """

    def __init__(self, ads: AdStoreProtocol, storage: ImageStorageProtocol, max_images: int) -> None:
        self._ads = ads
        self._storage = storage
        self._max_images = max_images

    @property
    def max_images(self) -> int:
        return self._max_images

    async def list_all(self) -> list[Ad]:
        return await self._ads.list_all()

    async def search(self, term: str) -> list[Ad]:
        return await self._ads.search(term)

    async def list_for_user(self, user_id: str) -> list[Ad]:
        return await self._ads.list_by_user(user_id)

    async def get(self, ad_id: str) -> Ad:
        ad = await self._ads.get(ad_id)
        if ad is None:
            raise NotFoundError(AD_NOT_FOUND)
        return ad

    async def create(self, owner: User, fields: dict[str, Any]) -> Ad:
        return await self._ads.create(owner.id, fields)

    async def update(self, actor: User, ad_id: str, fields: dict[str, Any]) -> Ad:
        await self._owned(actor, ad_id)
        updated = await self._ads.update(ad_id, fields)
        if updated is None:
            raise NotFoundError(AD_NOT_FOUND)
        return updated

    async def delete(self, actor: User, ad_id: str) -> None:
        ad = await self._owned(actor, ad_id)
        if not await self._ads.delete(ad_id):
            raise NotFoundError(AD_NOT_FOUND)
        for filename in ad.images:
            await self._storage.delete(AD_IMAGES_FOLDER, filename)

    async def list_images(self, ad_id: str) -> list[str]:
        return (await self.get(ad_id)).images

    async def add_image(self, actor: User, ad_id: str, upload: UploadedFile) -> str:
        """Grava a imagem e registra no anúncio.

        Raises:
            ImageLimitError: anúncio já tem o máximo de imagens
            InvalidUploadError: tipo ou tamanho não aceito
        """
        ad = await self._owned(actor, ad_id)
        if len(ad.images) >= self._max_images:
            raise ImageLimitError(self._max_images)

        filename = await self._storage.save(AD_IMAGES_FOLDER, upload.content, upload.content_type)
        try:
            await self._ads.add_image(ad_id, filename, limit=self._max_images)
        except ImageLimitError:
            await self._storage.delete(AD_IMAGES_FOLDER, filename)
            raise
        return filename

    async def remove_image(self, actor: User, ad_id: str, filename: str) -> bool:
        """Remove imagem do anúncio; repetir a chamada não é erro.

        Returns:
            True se o registro existia.
        """
        if not is_safe_filename(filename):
            raise InvalidUploadError("Nome de arquivo inválido")
        await self._owned(actor, ad_id)

        removed = await self._ads.remove_image(ad_id, filename)
        # Arquivo só é apagado se pertencia a este anúncio
        if removed:
            await self._storage.delete(AD_IMAGES_FOLDER, filename)
        logger.info("ad_image_removed", extra={"ad_id": ad_id, "removed": removed})
        return removed

    def image_path(self, filename: str) -> str:
        return self._storage.public_path(AD_IMAGES_FOLDER, filename)

    async def _owned(self, actor: User, ad_id: str) -> Ad:
        ad = await self.get(ad_id)
        if ad.user_id != actor.id:
            raise PermissionDeniedError("Você só pode alterar seus próprios anúncios")
        return ad
