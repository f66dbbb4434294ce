"""Engine async do SQLAlchemy e operações de schema.

O engine é o único recurso compartilhado entre requisições; o pool do
driver cuida de adquirir e devolver conexões.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from app.infra.stores.schema import metadata
from config.settings.infra.database import DatabaseSettings

logger = logging.getLogger(__name__)


def create_database_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Cria engine async conforme a URL configurada.

    SQLite usa NullPool (uma conexão por uso) e liga foreign keys em cada
    conexão; os demais bancos usam o pool padrão com pre-ping.
    """
    if settings.is_sqlite:
        engine = create_async_engine(settings.url, echo=settings.echo, poolclass=NullPool)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_async_engine(
            settings.url,
            echo=settings.echo,
            pool_size=settings.pool_size,
            pool_pre_ping=True,
        )

    logger.info(
        "database_engine_created",
        extra={"dialect": engine.dialect.name, "pool": type(engine.pool).__name__},
    )
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def create_schema(engine: AsyncEngine) -> None:
    """Cria as tabelas que ainda não existem."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("database_schema_ready")


async def drop_schema(engine: AsyncEngine) -> None:
    """Remove todas as tabelas (uso em scripts de manutenção)."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    logger.warning("database_schema_dropped")


async def ping(engine: AsyncEngine) -> None:
    """Executa SELECT 1; propaga a exceção do driver em caso de falha."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
