"""Agregador de settings do Onde Tem?.

Re-exporta as settings de cada domínio.
"""

from __future__ import annotations

from config.settings.auth import AuthSettings, get_auth_settings
from config.settings.base import BaseSettings, Environment, get_base_settings
from config.settings.client import ClientSettings, get_client_settings
from config.settings.infra import (
    ALLOWED_IMAGE_TYPES,
    DatabaseSettings,
    StorageSettings,
    get_database_settings,
    get_storage_settings,
)

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "AuthSettings",
    "BaseSettings",
    "ClientSettings",
    "DatabaseSettings",
    "Environment",
    "StorageSettings",
    "get_auth_settings",
    "get_base_settings",
    "get_client_settings",
    "get_database_settings",
    "get_storage_settings",
]
