"""Wrappers dos endpoints de favoritos (todos autenticados)."""

from __future__ import annotations

from typing import Any

from client.api.base import ApiClient, Result

FAVORITES_PATH = "/api/favorites"


class FavoritesApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def list_ads(self) -> Result[list[dict[str, Any]]]:
        return await self.client.request("GET", FAVORITES_PATH, auth=True)

    async def list_ids(self) -> Result[list[str]]:
        result = await self.client.request("GET", f"{FAVORITES_PATH}/ids", auth=True)
        return result.map(lambda body: list(body.get("ids", [])))

    async def add(self, ad_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("POST", f"{FAVORITES_PATH}/{ad_id}", auth=True)

    async def remove(self, ad_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("DELETE", f"{FAVORITES_PATH}/{ad_id}", auth=True)

    async def check(self, ad_id: str) -> Result[bool]:
        result = await self.client.request("GET", f"{FAVORITES_PATH}/{ad_id}/check", auth=True)
        return result.map(lambda body: bool(body.get("isFavorite")))
