"""Imagens gravadas em disco e servidas estaticamente em /uploads.

Nomes de arquivo são gerados (uuid + extensão do tipo aceito); o nome
enviado pelo usuário nunca chega ao sistema de arquivos.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from pathlib import Path

from app.domain.errors import InvalidUploadError
from app.protocols.image_storage import ImageStorageProtocol
from config.settings.infra.storage import ALLOWED_IMAGE_TYPES

logger = logging.getLogger(__name__)

AD_IMAGES_FOLDER = "ad_images"
USER_PHOTOS_FOLDER = "users"

PUBLIC_PREFIX = "/uploads"


class LocalImageStorage(ImageStorageProtocol):
    """Arquivos em `<root>/<folder>/<filename>`.

    Args:
        root: Diretório montado em /uploads
        max_bytes: Tamanho máximo aceito por arquivo
    """

    def __init__(self, root: str | Path, max_bytes: int) -> None:
        self._root = Path(root)
        self._max_bytes = max_bytes

    @property
    def root(self) -> Path:
        return self._root

    def ensure_folders(self) -> None:
        """Cria os diretórios de upload (chamado no startup)."""
        for folder in (AD_IMAGES_FOLDER, USER_PHOTOS_FOLDER):
            (self._root / folder).mkdir(parents=True, exist_ok=True)

    async def save(self, folder: str, content: bytes, content_type: str) -> str:
        extension = ALLOWED_IMAGE_TYPES.get(content_type.lower())
        if extension is None:
            raise InvalidUploadError("Apenas imagens JPEG, PNG ou JPG são permitidas")
        if not content:
            raise InvalidUploadError("Arquivo vazio")
        if len(content) > self._max_bytes:
            raise InvalidUploadError(
                f"Arquivo excede o limite de {self._max_bytes // (1024 * 1024)} MB"
            )

        filename = f"{uuid.uuid4().hex}{extension}"
        target = self._path(folder, filename)
        target.parent.mkdir(parents=True, exist_ok=True)
        await asyncio.to_thread(target.write_bytes, content)

        logger.info(
            "upload_saved",
            extra={"folder": folder, "upload_file": filename, "size_bytes": len(content)},
        )
        return filename

    async def delete(self, folder: str, filename: str) -> bool:
        target = self._path(folder, filename)
        try:
            await asyncio.to_thread(target.unlink)
        except FileNotFoundError:
            logger.debug("upload_already_absent", extra={"folder": folder, "upload_file": filename})
            return False
        logger.info("upload_deleted", extra={"folder": folder, "upload_file": filename})
        return True

    def public_path(self, folder: str, filename: str) -> str:
        return f"{PUBLIC_PREFIX}/{folder}/{filename}"

    def _path(self, folder: str, filename: str) -> Path:
        if not is_safe_filename(filename):
            raise InvalidUploadError("Nome de arquivo inválido")
        return self._root / folder / filename


def is_safe_filename(filename: str) -> bool:
    """Aceita apenas um nome simples (sem diretórios nem '..')."""
    return bool(filename) and Path(filename).name == filename and filename not in {".", ".."}
