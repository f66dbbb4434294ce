"""Comment - comentário de um usuário em um anúncio."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.domain.user import utcnow

MAX_COMMENT_LENGTH = 1000


class Comment(BaseModel):
    """Comentário persistido.

    `full_name`/`nickname` (autor) e `ad_title` só vêm preenchidos nas
    listagens que fazem join com users/ads.
    """

    id: str
    ad_id: str
    user_id: str
    content: str = Field(..., max_length=MAX_COMMENT_LENGTH)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    full_name: str | None = None
    nickname: str | None = None
    ad_title: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
