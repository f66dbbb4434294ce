"""Settings de armazenamento de arquivos enviados (imagens e fotos)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ALLOWED_IMAGE_TYPES: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
}


@dataclass(frozen=True)
class StorageSettings:
    """Configurações de upload.

    Attributes:
        upload_dir: Diretório raiz servido em /uploads
        max_images_per_ad: Limite de imagens por anúncio
        max_upload_bytes: Tamanho máximo por arquivo
    """

    upload_dir: str = "uploads"
    max_images_per_ad: int = 5
    max_upload_bytes: int = 5 * 1024 * 1024

    def validate(self) -> list[str]:
        """Valida configurações de upload."""
        errors: list[str] = []

        if not self.upload_dir:
            errors.append("UPLOAD_DIR não pode ser vazio")

        if self.max_images_per_ad < 1:
            errors.append(f"MAX_IMAGES_PER_AD inválido: {self.max_images_per_ad}")

        if self.max_upload_bytes < 1:
            errors.append(f"MAX_UPLOAD_BYTES inválido: {self.max_upload_bytes}")

        return errors


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    return StorageSettings(
        upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
        max_images_per_ad=int(os.getenv("MAX_IMAGES_PER_AD", "5")),
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024))),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
