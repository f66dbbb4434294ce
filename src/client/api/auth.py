"""Wrappers dos endpoints de autenticação."""

from __future__ import annotations

from typing import Any

from client.api.base import ApiClient, Result

AUTH_PATH = "/api/auth"


class AuthApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def login(self, email: str, password: str) -> Result[dict[str, Any]]:
        """Ok traz `token` e `user`."""
        return await self.client.request(
            "POST", f"{AUTH_PATH}/login", json={"email": email, "password": password}
        )

    async def logout(self) -> Result[dict[str, Any]]:
        return await self.client.request("POST", f"{AUTH_PATH}/logout")

    async def me(self) -> Result[dict[str, Any]]:
        return await self.client.request("GET", f"{AUTH_PATH}/me", auth=True)
