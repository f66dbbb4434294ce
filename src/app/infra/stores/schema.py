"""Tabelas relacionais (SQLAlchemy Core).

Ids são UUIDs em texto, gerados pela aplicação. Conteúdo de anúncio é
texto livre para que o valor gravado volte idêntico na leitura.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

from app.domain.comment import MAX_COMMENT_LENGTH

metadata = MetaData()

ID_LENGTH = 36

users_table = Table(
    "users",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column("full_name", String(100), nullable=False),
    Column("nickname", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("photo_path", String(255)),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

ads_table = Table(
    "ads",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "user_id",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255)),
    Column("short", String(255)),
    Column("description", Text),
    Column("tags", String(255)),
    Column("zipcode", String(20)),
    Column("city", String(100)),
    Column("state", String(50)),
    Column("address1", String(255)),
    Column("streetnumber", String(20)),
    Column("address2", String(255)),
    Column("radius", String(20)),
    Column("phone1", String(30)),
    Column("phone2", String(30)),
    Column("whatsapp", String(30)),
    Column("email", String(255)),
    Column("website", String(255)),
    Column("startdate", String(30)),
    Column("finishdate", String(30)),
    Column("timetext", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Index("ix_ads_user_id", "user_id"),
)

ad_images_table = Table(
    "ad_images",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "ad_id",
        String(ID_LENGTH),
        ForeignKey("ads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("filename", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("ad_id", "filename", name="uq_ad_images_ad_filename"),
)

favorites_table = Table(
    "favorites",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "user_id",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "ad_id",
        String(ID_LENGTH),
        ForeignKey("ads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("user_id", "ad_id", name="uq_favorites_user_ad"),
)

comments_table = Table(
    "comments",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "ad_id",
        String(ID_LENGTH),
        ForeignKey("ads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", String(MAX_COMMENT_LENGTH), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Index("ix_comments_ad_id", "ad_id"),
)
