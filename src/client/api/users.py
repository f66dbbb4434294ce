"""Wrappers dos endpoints de usuários (cadastro e perfil em multipart)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from client.api.ads import StagedFile
from client.api.base import ApiClient, Result

USERS_PATH = "/api/users"

# Campos do formulário enviados ao servidor
USER_PAYLOAD_FIELDS: tuple[str, ...] = ("fullName", "nickname", "email", "password")


def _form_data(fields: Mapping[str, Any]) -> dict[str, str]:
    return {
        name: str(fields[name])
        for name in USER_PAYLOAD_FIELDS
        if fields.get(name) not in (None, "")
    }


def _photo(photo: StagedFile | None) -> dict[str, tuple[str, bytes, str]] | None:
    if photo is None:
        return None
    return {"photo": (photo.filename, photo.content, photo.content_type)}


class UsersApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def list_all(self) -> Result[list[dict[str, Any]]]:
        return await self.client.request("GET", USERS_PATH)

    async def get(self, user_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("GET", f"{USERS_PATH}/{user_id}")

    async def me(self) -> Result[dict[str, Any]]:
        return await self.client.request("GET", f"{USERS_PATH}/me", auth=True)

    async def create(
        self,
        fields: Mapping[str, Any],
        photo: StagedFile | None = None,
    ) -> Result[dict[str, Any]]:
        """Cadastro; Ok traz `message` e `userId`."""
        return await self.client.request(
            "POST", USERS_PATH, data=_form_data(fields), files=_photo(photo)
        )

    async def update(
        self,
        user_id: str,
        fields: Mapping[str, Any],
        photo: StagedFile | None = None,
    ) -> Result[dict[str, Any]]:
        return await self.client.request(
            "PUT",
            f"{USERS_PATH}/{user_id}",
            auth=True,
            data=_form_data(fields),
            files=_photo(photo),
        )

    async def delete(self, user_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("DELETE", f"{USERS_PATH}/{user_id}", auth=True)
