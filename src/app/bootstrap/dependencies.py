"""Factories — criação das implementações concretas e do container.

O container agrupa o engine e os serviços montados sobre ele; a app
FastAPI recebe um container pronto (testes montam o seu com SQLite e
diretório de upload temporários).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.security import PasswordHasher, TokenService
from app.infra.storage import LocalImageStorage
from app.infra.stores import (
    SqlAdStore,
    SqlCommentStore,
    SqlFavoriteStore,
    SqlUserStore,
    create_database_engine,
)
from app.services import AccountService, AdService, CommentService, FavoriteService
from config.settings import (
    AuthSettings,
    DatabaseSettings,
    StorageSettings,
    get_auth_settings,
    get_database_settings,
    get_storage_settings,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Dependências de longa duração compartilhadas pelas rotas."""

    engine: AsyncEngine
    storage: LocalImageStorage
    accounts: AccountService
    ads: AdService
    favorites: FavoriteService
    comments: CommentService

    async def dispose(self) -> None:
        """Fecha o pool de conexões."""
        await self.engine.dispose()


def create_image_storage(settings: StorageSettings) -> LocalImageStorage:
    """Cria armazenamento local de imagens."""
    return LocalImageStorage(settings.upload_dir, max_bytes=settings.max_upload_bytes)


def create_container(
    database: DatabaseSettings | None = None,
    storage: StorageSettings | None = None,
    auth: AuthSettings | None = None,
) -> AppContainer:
    """Monta o container a partir das settings (env quando omitidas).

    Args:
        database: Settings de banco
        storage: Settings de upload
        auth: Settings de JWT

    Returns:
        AppContainer com stores e serviços ligados ao mesmo engine.
    """
    database = database or get_database_settings()
    storage = storage or get_storage_settings()
    auth = auth or get_auth_settings()

    engine = create_database_engine(database)
    image_storage = create_image_storage(storage)

    users = SqlUserStore(engine)
    ads = SqlAdStore(engine)

    container = AppContainer(
        engine=engine,
        storage=image_storage,
        accounts=AccountService(
            users=users,
            ads=ads,
            storage=image_storage,
            hasher=PasswordHasher(),
            tokens=TokenService(auth),
        ),
        ads=AdService(ads, image_storage, max_images=storage.max_images_per_ad),
        favorites=FavoriteService(SqlFavoriteStore(engine), ads),
        comments=CommentService(SqlCommentStore(engine), ads),
    )
    logger.info(
        "container_created",
        extra={"upload_dir": str(image_storage.root), "max_images": storage.max_images_per_ad},
    )
    return container
