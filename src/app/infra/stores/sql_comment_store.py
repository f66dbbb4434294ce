"""Store de comentários sobre SQLAlchemy Core (async)."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert, select, update

from app.domain.comment import Comment
from app.domain.user import utcnow
from app.infra.stores.schema import ads_table, comments_table, users_table
from app.protocols.comment_store import CommentStoreProtocol

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


class SqlCommentStore(CommentStoreProtocol):
    """Comentários na tabela `comments`."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def create(self, ad_id: str, user_id: str, content: str) -> Comment:
        now = utcnow()
        values = {
            "id": str(uuid.uuid4()),
            "ad_id": ad_id,
            "user_id": user_id,
            "content": content,
            "created_at": now,
            "updated_at": now,
        }
        async with self._engine.begin() as conn:
            await conn.execute(insert(comments_table).values(**values))

        logger.info("comment_created", extra={"comment_id": values["id"], "ad_id": ad_id})
        return await self.get(values["id"]) or Comment.model_validate(values)

    async def get(self, comment_id: str) -> Comment | None:
        stmt = (
            select(comments_table, users_table.c.full_name, users_table.c.nickname)
            .join(users_table, users_table.c.id == comments_table.c.user_id)
            .where(comments_table.c.id == comment_id)
        )
        async with self._engine.connect() as conn:
            row = (await conn.execute(stmt)).mappings().first()
        return Comment.model_validate(dict(row)) if row else None

    async def list_by_ad(self, ad_id: str) -> list[Comment]:
        stmt = (
            select(comments_table, users_table.c.full_name, users_table.c.nickname)
            .join(users_table, users_table.c.id == comments_table.c.user_id)
            .where(comments_table.c.ad_id == ad_id)
            .order_by(comments_table.c.created_at)
        )
        async with self._engine.connect() as conn:
            rows = (await conn.execute(stmt)).mappings().all()
        return [Comment.model_validate(dict(row)) for row in rows]

    async def count_by_ad(self, ad_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.ad_id == ad_id)
        )
        async with self._engine.connect() as conn:
            return int(await conn.scalar(stmt) or 0)

    async def list_by_user(self, user_id: str) -> list[Comment]:
        stmt = (
            select(comments_table, ads_table.c.title.label("ad_title"))
            .join(ads_table, ads_table.c.id == comments_table.c.ad_id)
            .where(comments_table.c.user_id == user_id)
            .order_by(comments_table.c.created_at.desc())
        )
        async with self._engine.connect() as conn:
            rows = (await conn.execute(stmt)).mappings().all()
        return [Comment.model_validate(dict(row)) for row in rows]

    async def update(self, comment_id: str, content: str) -> Comment | None:
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=utcnow())
        )
        async with self._engine.begin() as conn:
            result = await conn.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get(comment_id)

    async def delete(self, comment_id: str) -> bool:
        async with self._engine.begin() as conn:
            result = await conn.execute(
                delete(comments_table).where(comments_table.c.id == comment_id)
            )
        return result.rowcount > 0
