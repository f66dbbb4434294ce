"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - schema: tabelas SQLAlchemy Core
    - database: engine async, criação de schema e ping
    - sql_*_store: stores de usuários, anúncios, favoritos e comentários
"""

from __future__ import annotations

from app.infra.stores.database import create_database_engine, create_schema, ping
from app.infra.stores.sql_ad_store import SqlAdStore
from app.infra.stores.sql_comment_store import SqlCommentStore
from app.infra.stores.sql_favorite_store import SqlFavoriteStore
from app.infra.stores.sql_user_store import SqlUserStore

__all__ = [
    "SqlAdStore",
    "SqlCommentStore",
    "SqlFavoriteStore",
    "SqlUserStore",
    "create_database_engine",
    "create_schema",
    "ping",
]
