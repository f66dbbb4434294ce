"""Store de anúncios e imagens sobre SQLAlchemy Core (async)."""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, or_, select, update

from app.domain.ad import AD_CONTENT_FIELDS, Ad
from app.domain.errors import ImageLimitError
from app.domain.user import utcnow
from app.infra.stores.schema import ad_images_table, ads_table
from app.protocols.ad_store import AdStoreProtocol

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

logger = logging.getLogger(__name__)

_SEARCH_COLUMNS = ("title", "short", "description", "tags", "city")


class SqlAdStore(AdStoreProtocol):
    """Anúncios na tabela `ads`, imagens na tabela `ad_images`."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def list_all(self) -> list[Ad]:
        stmt = select(ads_table).order_by(ads_table.c.created_at.desc())
        return await self._fetch_ads(stmt)

    async def search(self, term: str) -> list[Ad]:
        needle = term.strip().lower()
        stmt = select(ads_table).order_by(ads_table.c.created_at.desc())
        if needle:
            stmt = stmt.where(
                or_(
                    *(
                        func.lower(ads_table.c[name]).contains(needle, autoescape=True)
                        for name in _SEARCH_COLUMNS
                    )
                )
            )
        return await self._fetch_ads(stmt)

    async def list_by_user(self, user_id: str) -> list[Ad]:
        stmt = (
            select(ads_table)
            .where(ads_table.c.user_id == user_id)
            .order_by(ads_table.c.title)
        )
        return await self._fetch_ads(stmt)

    async def get(self, ad_id: str) -> Ad | None:
        ads = await self._fetch_ads(select(ads_table).where(ads_table.c.id == ad_id))
        return ads[0] if ads else None

    async def create(self, user_id: str, fields: dict[str, Any]) -> Ad:
        now = utcnow()
        values = _content_values(fields)
        values.update(
            {
                "id": str(uuid.uuid4()),
                "user_id": user_id,
                "created_at": now,
                "updated_at": now,
            }
        )
        async with self._engine.begin() as conn:
            await conn.execute(insert(ads_table).values(**values))

        logger.info("ad_created", extra={"ad_id": values["id"], "user_id": user_id})
        return Ad.model_validate(values)

    async def update(self, ad_id: str, fields: dict[str, Any]) -> Ad | None:
        values = _content_values(fields)
        values["updated_at"] = utcnow()
        stmt = update(ads_table).where(ads_table.c.id == ad_id).values(**values)
        async with self._engine.begin() as conn:
            result = await conn.execute(stmt)
        if result.rowcount == 0:
            return None

        logger.info("ad_updated", extra={"ad_id": ad_id, "fields": sorted(values)})
        return await self.get(ad_id)

    async def delete(self, ad_id: str) -> bool:
        async with self._engine.begin() as conn:
            await conn.execute(delete(ad_images_table).where(ad_images_table.c.ad_id == ad_id))
            result = await conn.execute(delete(ads_table).where(ads_table.c.id == ad_id))
        deleted = result.rowcount > 0
        if deleted:
            logger.info("ad_deleted", extra={"ad_id": ad_id})
        return deleted

    async def list_images(self, ad_id: str) -> list[str]:
        async with self._engine.connect() as conn:
            images = await _images_for(conn, [ad_id])
        return images.get(ad_id, [])

    async def list_user_image_filenames(self, user_id: str) -> list[str]:
        stmt = (
            select(ad_images_table.c.filename)
            .join(ads_table, ads_table.c.id == ad_images_table.c.ad_id)
            .where(ads_table.c.user_id == user_id)
        )
        async with self._engine.connect() as conn:
            return list((await conn.execute(stmt)).scalars().all())

    async def add_image(self, ad_id: str, filename: str, *, limit: int) -> None:
        count_stmt = (
            select(func.count())
            .select_from(ad_images_table)
            .where(ad_images_table.c.ad_id == ad_id)
        )
        async with self._engine.begin() as conn:
            current = await conn.scalar(count_stmt) or 0
            if current >= limit:
                raise ImageLimitError(limit)
            await conn.execute(
                insert(ad_images_table).values(
                    id=str(uuid.uuid4()),
                    ad_id=ad_id,
                    filename=filename,
                    created_at=utcnow(),
                )
            )
        logger.info("ad_image_added", extra={"ad_id": ad_id, "image_count": current + 1})

    async def remove_image(self, ad_id: str, filename: str) -> bool:
        stmt = delete(ad_images_table).where(
            ad_images_table.c.ad_id == ad_id,
            ad_images_table.c.filename == filename,
        )
        async with self._engine.begin() as conn:
            result = await conn.execute(stmt)
        return result.rowcount > 0

    async def _fetch_ads(self, stmt: Select) -> list[Ad]:
        async with self._engine.connect() as conn:
            rows = (await conn.execute(stmt)).mappings().all()
            images = await _images_for(conn, [row["id"] for row in rows])
        return [Ad.model_validate({**row, "images": images.get(row["id"], [])}) for row in rows]


async def _images_for(conn: AsyncConnection, ad_ids: list[str]) -> dict[str, list[str]]:
    """Agrupa nomes de arquivo por anúncio, na ordem de envio."""
    if not ad_ids:
        return {}
    stmt = (
        select(ad_images_table.c.ad_id, ad_images_table.c.filename)
        .where(ad_images_table.c.ad_id.in_(ad_ids))
        .order_by(ad_images_table.c.created_at, ad_images_table.c.filename)
    )
    grouped: dict[str, list[str]] = defaultdict(list)
    for ad_id, filename in (await conn.execute(stmt)).all():
        grouped[ad_id].append(filename)
    return grouped


def _content_values(fields: dict[str, Any]) -> dict[str, Any]:
    return {name: fields[name] for name in AD_CONTENT_FIELDS if name in fields}
