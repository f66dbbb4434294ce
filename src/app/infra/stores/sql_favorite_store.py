"""Store de favoritos sobre SQLAlchemy Core (async)."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError

from app.domain.ad import Ad
from app.domain.user import utcnow
from app.infra.stores.schema import ads_table, favorites_table
from app.infra.stores.sql_ad_store import _images_for
from app.protocols.favorite_store import FavoriteStoreProtocol

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


class SqlFavoriteStore(FavoriteStoreProtocol):
    """Favoritos na tabela `favorites` (único por usuário e anúncio)."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def add(self, user_id: str, ad_id: str) -> bool:
        if await self.exists(user_id, ad_id):
            return False
        stmt = insert(favorites_table).values(
            id=str(uuid.uuid4()),
            user_id=user_id,
            ad_id=ad_id,
            created_at=utcnow(),
        )
        try:
            async with self._engine.begin() as conn:
                await conn.execute(stmt)
        except IntegrityError:
            # Corrida entre duas requisições: o outro insert venceu
            return False
        return True

    async def remove(self, user_id: str, ad_id: str) -> bool:
        stmt = delete(favorites_table).where(
            favorites_table.c.user_id == user_id,
            favorites_table.c.ad_id == ad_id,
        )
        async with self._engine.begin() as conn:
            result = await conn.execute(stmt)
        return result.rowcount > 0

    async def exists(self, user_id: str, ad_id: str) -> bool:
        stmt = select(favorites_table.c.id).where(
            favorites_table.c.user_id == user_id,
            favorites_table.c.ad_id == ad_id,
        )
        async with self._engine.connect() as conn:
            return (await conn.scalar(stmt)) is not None

    async def list_ids(self, user_id: str) -> list[str]:
        stmt = (
            select(favorites_table.c.ad_id)
            .where(favorites_table.c.user_id == user_id)
            .order_by(favorites_table.c.created_at.desc())
        )
        async with self._engine.connect() as conn:
            return list((await conn.execute(stmt)).scalars().all())

    async def list_ads(self, user_id: str) -> list[Ad]:
        stmt = (
            select(ads_table)
            .join(favorites_table, favorites_table.c.ad_id == ads_table.c.id)
            .where(favorites_table.c.user_id == user_id)
            .order_by(favorites_table.c.created_at.desc())
        )
        async with self._engine.connect() as conn:
            rows = (await conn.execute(stmt)).mappings().all()
            images = await _images_for(conn, [row["id"] for row in rows])
        return [Ad.model_validate({**row, "images": images.get(row["id"], [])}) for row in rows]
