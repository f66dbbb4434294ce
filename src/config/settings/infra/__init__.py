"""Agregador de settings de infraestrutura."""

from __future__ import annotations

from config.settings.infra.database import (
    DatabaseSettings,
    get_database_settings,
)
from config.settings.infra.storage import (
    ALLOWED_IMAGE_TYPES,
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "DatabaseSettings",
    "StorageSettings",
    "get_database_settings",
    "get_storage_settings",
]
