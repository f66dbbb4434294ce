"""Wrappers dos endpoints de comentários."""

from __future__ import annotations

from typing import Any

from client.api.base import ApiClient, Result

COMMENTS_PATH = "/api/comments"


class CommentsApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def create(self, ad_id: str, content: str) -> Result[dict[str, Any]]:
        result = await self.client.request(
            "POST", COMMENTS_PATH, auth=True, json={"ad_id": ad_id, "content": content}
        )
        return result.map(lambda body: body["comment"])

    async def list_for_ad(self, ad_id: str) -> Result[list[dict[str, Any]]]:
        result = await self.client.request("GET", f"{COMMENTS_PATH}/ad/{ad_id}")
        return result.map(lambda body: list(body.get("comments", [])))

    async def count_for_ad(self, ad_id: str) -> Result[int]:
        result = await self.client.request("GET", f"{COMMENTS_PATH}/ad/{ad_id}/count")
        return result.map(lambda body: int(body.get("count", 0)))

    async def list_mine(self) -> Result[list[dict[str, Any]]]:
        result = await self.client.request("GET", f"{COMMENTS_PATH}/user", auth=True)
        return result.map(lambda body: list(body.get("comments", [])))

    async def update(self, comment_id: str, content: str) -> Result[dict[str, Any]]:
        result = await self.client.request(
            "PUT", f"{COMMENTS_PATH}/{comment_id}", auth=True, json={"content": content}
        )
        return result.map(lambda body: body["comment"])

    async def delete(self, comment_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("DELETE", f"{COMMENTS_PATH}/{comment_id}", auth=True)
