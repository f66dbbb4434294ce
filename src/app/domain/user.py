"""User - conta de usuário do Onde Tem?."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


class User(BaseModel):
    """Usuário persistido.

    O hash de senha nunca sai do backend: é excluído de toda serialização.
    """

    id: str
    full_name: str
    nickname: str
    email: str
    password_hash: str = Field(default="", exclude=True, repr=False)
    photo_path: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def to_public_dict(self) -> dict[str, Any]:
        """Representação pública usada nas respostas da API."""
        return {
            "id": self.id,
            "fullName": self.full_name,
            "nickname": self.nickname,
            "email": self.email,
            "photoPath": self.photo_path,
        }
