"""Store de usuários sobre SQLAlchemy Core (async)."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from app.domain.errors import DuplicateEmailError
from app.domain.user import User, utcnow
from app.infra.stores.schema import users_table
from app.protocols.user_store import UserStoreProtocol

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_UPDATABLE_COLUMNS = frozenset({"full_name", "nickname", "email", "password_hash", "photo_path"})


class SqlUserStore(UserStoreProtocol):
    """Usuários na tabela `users`."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def list_all(self) -> list[User]:
        stmt = select(users_table).order_by(users_table.c.full_name)
        async with self._engine.connect() as conn:
            rows = (await conn.execute(stmt)).mappings().all()
        return [User.model_validate(dict(row)) for row in rows]

    async def get(self, user_id: str) -> User | None:
        stmt = select(users_table).where(users_table.c.id == user_id)
        async with self._engine.connect() as conn:
            row = (await conn.execute(stmt)).mappings().first()
        return User.model_validate(dict(row)) if row else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(users_table).where(users_table.c.email == email.strip().lower())
        async with self._engine.connect() as conn:
            row = (await conn.execute(stmt)).mappings().first()
        return User.model_validate(dict(row)) if row else None

    async def create(
        self,
        *,
        full_name: str,
        nickname: str,
        email: str,
        password_hash: str,
        photo_path: str | None = None,
    ) -> User:
        now = utcnow()
        values = {
            "id": str(uuid.uuid4()),
            "full_name": full_name,
            "nickname": nickname,
            "email": email.strip().lower(),
            "password_hash": password_hash,
            "photo_path": photo_path,
            "created_at": now,
            "updated_at": now,
        }
        try:
            async with self._engine.begin() as conn:
                await conn.execute(insert(users_table).values(**values))
        except IntegrityError as exc:
            raise DuplicateEmailError() from exc

        logger.info("user_created", extra={"user_id": values["id"]})
        return User.model_validate(values)

    async def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        values = {key: value for key, value in changes.items() if key in _UPDATABLE_COLUMNS}
        if "email" in values:
            values["email"] = values["email"].strip().lower()
        values["updated_at"] = utcnow()

        stmt = update(users_table).where(users_table.c.id == user_id).values(**values)
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateEmailError() from exc

        if result.rowcount == 0:
            return None
        return await self.get(user_id)

    async def delete(self, user_id: str) -> bool:
        async with self._engine.begin() as conn:
            result = await conn.execute(delete(users_table).where(users_table.c.id == user_id))
        deleted = result.rowcount > 0
        if deleted:
            logger.info("user_deleted", extra={"user_id": user_id})
        return deleted
