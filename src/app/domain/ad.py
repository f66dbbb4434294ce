"""Ad - anúncio classificado e suas imagens."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.domain.user import utcnow

# Colunas de conteúdo editáveis pelo dono do anúncio, na ordem do formulário
AD_CONTENT_FIELDS: tuple[str, ...] = (
    "title",
    "short",
    "description",
    "tags",
    "zipcode",
    "city",
    "state",
    "address1",
    "streetnumber",
    "address2",
    "radius",
    "phone1",
    "phone2",
    "whatsapp",
    "email",
    "website",
    "startdate",
    "finishdate",
    "timetext",
)


class Ad(BaseModel):
    """Anúncio persistido, com nomes de arquivo das imagens associadas."""

    id: str
    user_id: str
    title: str | None = None
    short: str | None = None
    description: str | None = None
    tags: str | None = None
    zipcode: str | None = None
    city: str | None = None
    state: str | None = None
    address1: str | None = None
    streetnumber: str | None = None
    address2: str | None = None
    radius: str | None = None
    phone1: str | None = None
    phone2: str | None = None
    whatsapp: str | None = None
    email: str | None = None
    website: str | None = None
    startdate: str | None = None
    finishdate: str | None = None
    timetext: str | None = None
    images: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
