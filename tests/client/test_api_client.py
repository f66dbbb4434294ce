"""Testes do ApiClient e dos wrappers de endpoint (HTTP simulado com respx)."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from client.api import (
    AdsApi,
    ApiClient,
    ApiErrorKind,
    AuthApi,
    CommentsApi,
    Err,
    FavoritesApi,
    Ok,
    StagedFile,
    UsersApi,
)
from client.api.base import (
    NETWORK_MESSAGE,
    NOT_AUTHENTICATED_MESSAGE,
    TIMEOUT_MESSAGE,
    default_error_message,
    error_kind_for_status,
)

BASE = "http://api.test"


@pytest.fixture
def api_client() -> ApiClient:
    return ApiClient(BASE)


class TestErrorMapping:
    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            (400, ApiErrorKind.VALIDATION),
            (422, ApiErrorKind.VALIDATION),
            (401, ApiErrorKind.UNAUTHORIZED),
            (403, ApiErrorKind.FORBIDDEN),
            (404, ApiErrorKind.NOT_FOUND),
            (409, ApiErrorKind.CONFLICT),
            (429, ApiErrorKind.RATE_LIMITED),
            (500, ApiErrorKind.SERVER),
            (501, ApiErrorKind.SERVER),
            (503, ApiErrorKind.UNAVAILABLE),
            (418, ApiErrorKind.UNEXPECTED),
        ],
    )
    def test_kind_for_status(self, status: int, kind: ApiErrorKind) -> None:
        assert error_kind_for_status(status) is kind

    def test_default_messages(self) -> None:
        assert default_error_message(401) == "Você precisa fazer login para continuar."
        assert default_error_message(507) == "Erro no servidor. Tente novamente mais tarde."
        assert default_error_message(418).startswith("Erro na solicitação")


class TestApiClient:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success_returns_body(self, api_client: ApiClient) -> None:
        respx.get(f"{BASE}/api/ads").mock(return_value=httpx.Response(200, json=[{"id": "a1"}]))

        result = await api_client.request("GET", "/api/ads")

        assert result == Ok([{"id": "a1"}])
        assert result.is_ok is True

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_message_is_preferred(self, api_client: ApiClient) -> None:
        respx.post(f"{BASE}/api/users").mock(
            return_value=httpx.Response(409, json={"error": "Email já cadastrado"})
        )

        result = await api_client.request("POST", "/api/users", data={"email": "m@x.com"})

        assert isinstance(result, Err)
        assert result.error.kind is ApiErrorKind.CONFLICT
        assert result.error.message == "Email já cadastrado"
        assert result.error.status == 409

    @pytest.mark.asyncio
    @respx.mock
    async def test_status_without_body_uses_default_message(self, api_client: ApiClient) -> None:
        respx.get(f"{BASE}/api/ads/x").mock(return_value=httpx.Response(503))

        result = await api_client.request("GET", "/api/ads/x")

        assert isinstance(result, Err)
        assert result.error.kind is ApiErrorKind.UNAVAILABLE
        assert result.error.message == default_error_message(503)

    @pytest.mark.asyncio
    @respx.mock
    async def test_undecodable_body_is_not_raised(self, api_client: ApiClient) -> None:
        respx.get(f"{BASE}/api/ads").mock(return_value=httpx.Response(200, content=b"\xff\xfe\xfa lixo"))
        respx.get(f"{BASE}/api/users").mock(return_value=httpx.Response(502, content=b"\xff\xfe\xfa"))

        ok = await api_client.request("GET", "/api/ads")
        failed = await api_client.request("GET", "/api/users")

        assert ok == Ok(None)
        assert isinstance(failed, Err)
        assert failed.error.kind is ApiErrorKind.UNAVAILABLE
        assert failed.error.message == default_error_message(502)

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_and_timeout_errors(self, api_client: ApiClient) -> None:
        respx.get(f"{BASE}/api/ads").mock(side_effect=httpx.ConnectError("recusado"))
        respx.get(f"{BASE}/api/users").mock(side_effect=httpx.ReadTimeout("lento"))

        network = await api_client.request("GET", "/api/ads")
        timeout = await api_client.request("GET", "/api/users")

        assert isinstance(network, Err)
        assert network.error.kind is ApiErrorKind.NETWORK
        assert network.error.message == NETWORK_MESSAGE
        assert isinstance(timeout, Err)
        assert timeout.error.kind is ApiErrorKind.TIMEOUT
        assert timeout.error.message == TIMEOUT_MESSAGE

    @pytest.mark.asyncio
    @respx.mock
    async def test_auth_call_without_token_does_not_hit_network(self, api_client: ApiClient) -> None:
        route = respx.get(f"{BASE}/api/ads/my").mock(return_value=httpx.Response(200, json=[]))

        result = await api_client.request("GET", "/api/ads/my", auth=True)

        assert isinstance(result, Err)
        assert result.error.kind is ApiErrorKind.UNAUTHORIZED
        assert result.error.message == NOT_AUTHENTICATED_MESSAGE
        assert route.called is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_token_is_sent_as_bearer(self, api_client: ApiClient) -> None:
        route = respx.get(f"{BASE}/api/auth/me").mock(return_value=httpx.Response(200, json={"id": "u1"}))
        api_client.set_token("tok-123")

        await api_client.request("GET", "/api/auth/me", auth=True)

        assert route.calls.last.request.headers["Authorization"] == "Bearer tok-123"


class TestEndpointWrappers:
    @pytest.mark.asyncio
    @respx.mock
    async def test_ads_wrappers_unwrap_bodies(self, api_client: ApiClient) -> None:
        api_client.set_token("tok")
        ads = AdsApi(api_client)
        respx.get(f"{BASE}/api/ads/a1/images").mock(
            return_value=httpx.Response(200, json={"images": ["x.jpg"]})
        )
        search = respx.get(f"{BASE}/api/ads/search").mock(return_value=httpx.Response(200, json=[]))
        upload = respx.post(f"{BASE}/api/ads/a1/images").mock(
            return_value=httpx.Response(201, json={"filename": "y.jpg", "path": "/uploads/ad_images/y.jpg"})
        )

        assert await ads.list_images("a1") == Ok(["x.jpg"])
        await ads.search("bolo")
        result = await ads.upload_image("a1", StagedFile("foto.jpg", b"\xff\xd8", "image/jpeg"))

        assert search.calls.last.request.url.params["q"] == "bolo"
        assert result == Ok({"filename": "y.jpg", "path": "/uploads/ad_images/y.jpg"})
        assert b'name="image"' in upload.calls.last.request.content

    @pytest.mark.asyncio
    @respx.mock
    async def test_engagement_wrappers(self, api_client: ApiClient) -> None:
        api_client.set_token("tok")
        respx.get(f"{BASE}/api/favorites/ids").mock(return_value=httpx.Response(200, json={"ids": ["a1"]}))
        respx.get(f"{BASE}/api/favorites/a1/check").mock(
            return_value=httpx.Response(200, json={"isFavorite": True})
        )
        respx.get(f"{BASE}/api/comments/ad/a1/count").mock(return_value=httpx.Response(200, json={"count": 3}))
        create = respx.post(f"{BASE}/api/comments").mock(
            return_value=httpx.Response(201, json={"message": "ok", "comment": {"id": "c1"}})
        )

        favorites = FavoritesApi(api_client)
        comments = CommentsApi(api_client)

        assert await favorites.list_ids() == Ok(["a1"])
        assert await favorites.check("a1") == Ok(True)
        assert await comments.count_for_ad("a1") == Ok(3)
        assert await comments.create("a1", "Oi") == Ok({"id": "c1"})
        assert json.loads(create.calls.last.request.content) == {"ad_id": "a1", "content": "Oi"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_user_signup_skips_empty_fields(self, api_client: ApiClient) -> None:
        route = respx.post(f"{BASE}/api/users").mock(
            return_value=httpx.Response(201, json={"message": "ok", "userId": "u1"})
        )

        await UsersApi(api_client).create(
            {"fullName": "Maria da Silva", "nickname": "Maria", "email": "m@x.com", "password": "abc", "confirmpassword": "abc"},
            None,
        )

        body = route.calls.last.request.content.decode()
        assert "fullName=Maria+da+Silva" in body
        assert "confirmpassword" not in body

    @pytest.mark.asyncio
    @respx.mock
    async def test_login_wrapper(self, api_client: ApiClient) -> None:
        respx.post(f"{BASE}/api/auth/login").mock(
            return_value=httpx.Response(401, json={"error": "Credenciais inválidas"})
        )

        result = await AuthApi(api_client).login("m@x.com", "errada")

        assert isinstance(result, Err)
        assert result.error.message == "Credenciais inválidas"
