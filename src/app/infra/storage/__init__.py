"""Armazenamento de arquivos enviados."""

from app.infra.storage.local_storage import (
    AD_IMAGES_FOLDER,
    USER_PHOTOS_FOLDER,
    LocalImageStorage,
)

__all__ = [
    "AD_IMAGES_FOLDER",
    "USER_PHOTOS_FOLDER",
    "LocalImageStorage",
]
