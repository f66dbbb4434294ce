"""Testes dos stores SQL sobre SQLite temporário."""

from __future__ import annotations

import pytest
import pytest_asyncio

from app.domain.errors import DuplicateEmailError, ImageLimitError
from app.infra.stores import (
    SqlAdStore,
    SqlCommentStore,
    SqlFavoriteStore,
    SqlUserStore,
    create_database_engine,
)
from app.infra.stores.database import create_schema, drop_schema
from config.settings import DatabaseSettings


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_database_engine(DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'stores.db'}"))
    await create_schema(engine)
    yield engine
    await drop_schema(engine)
    await engine.dispose()


async def _user(engine, email: str = "Maria@Example.com") -> str:
    user = await SqlUserStore(engine).create(
        full_name="Maria da Silva",
        nickname="Maria",
        email=email,
        password_hash="hash",
    )
    return user.id


class TestSqlUserStore:
    @pytest.mark.asyncio
    async def test_email_is_normalized_and_unique(self, engine) -> None:
        store = SqlUserStore(engine)
        user_id = await _user(engine)

        found = await store.get_by_email("  maria@example.com ")
        assert found is not None
        assert found.id == user_id

        with pytest.raises(DuplicateEmailError):
            await _user(engine, email="MARIA@example.com")

    @pytest.mark.asyncio
    async def test_update_ignores_unknown_columns(self, engine) -> None:
        store = SqlUserStore(engine)
        user_id = await _user(engine)

        updated = await store.update(user_id, {"nickname": "Mari", "id": "outro"})

        assert updated is not None
        assert updated.id == user_id
        assert updated.nickname == "Mari"
        assert await store.update("nao-existe", {"nickname": "x"}) is None


class TestSqlAdStore:
    @pytest.mark.asyncio
    async def test_create_update_and_images(self, engine) -> None:
        store = SqlAdStore(engine)
        user_id = await _user(engine)
        ad = await store.create(user_id, {"title": "Bolo", "short": "Doce", "unknown": "x"})

        await store.add_image(ad.id, "a.jpg", limit=2)
        await store.add_image(ad.id, "b.jpg", limit=2)
        with pytest.raises(ImageLimitError):
            await store.add_image(ad.id, "c.jpg", limit=2)

        assert await store.list_images(ad.id) == ["a.jpg", "b.jpg"]
        assert await store.list_user_image_filenames(user_id) == ["a.jpg", "b.jpg"]
        assert await store.remove_image(ad.id, "a.jpg") is True
        assert await store.remove_image(ad.id, "a.jpg") is False

        updated = await store.update(ad.id, {"city": "Recife"})
        assert updated is not None
        assert updated.city == "Recife"
        assert updated.title == "Bolo"
        assert updated.images == ["b.jpg"]

    @pytest.mark.asyncio
    async def test_search_escapes_wildcards(self, engine) -> None:
        store = SqlAdStore(engine)
        user_id = await _user(engine)
        await store.create(user_id, {"title": "Desconto 50% hoje"})
        await store.create(user_id, {"title": "Desconto 50 reais"})

        found = await store.search("50%")

        assert [ad.title for ad in found] == ["Desconto 50% hoje"]

    @pytest.mark.asyncio
    async def test_deleting_user_cascades(self, engine) -> None:
        ads = SqlAdStore(engine)
        user_id = await _user(engine)
        ad = await ads.create(user_id, {"title": "Bolo"})
        await ads.add_image(ad.id, "a.jpg", limit=5)

        assert await SqlUserStore(engine).delete(user_id) is True

        assert await ads.get(ad.id) is None
        assert await ads.list_images(ad.id) == []


class TestEngagementStores:
    @pytest.mark.asyncio
    async def test_favorites_are_unique_per_user(self, engine) -> None:
        favorites = SqlFavoriteStore(engine)
        user_id = await _user(engine)
        ad = await SqlAdStore(engine).create(user_id, {"title": "Bolo"})

        assert await favorites.add(user_id, ad.id) is True
        assert await favorites.add(user_id, ad.id) is False
        assert await favorites.list_ids(user_id) == [ad.id]
        assert [a.id for a in await favorites.list_ads(user_id)] == [ad.id]
        assert await favorites.remove(user_id, ad.id) is True
        assert await favorites.exists(user_id, ad.id) is False

    @pytest.mark.asyncio
    async def test_comments_join_author_and_ad(self, engine) -> None:
        comments = SqlCommentStore(engine)
        user_id = await _user(engine)
        ad = await SqlAdStore(engine).create(user_id, {"title": "Bolo"})

        created = await comments.create(ad.id, user_id, "Delicioso")

        assert created.nickname == "Maria"
        assert await comments.count_by_ad(ad.id) == 1
        mine = await comments.list_by_user(user_id)
        assert mine[0].ad_title == "Bolo"
        assert (await comments.update(created.id, "Muito bom")).content == "Muito bom"
        assert await comments.delete(created.id) is True
        assert await comments.get(created.id) is None
