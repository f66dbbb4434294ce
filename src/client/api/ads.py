"""Wrappers dos endpoints de anúncios e imagens de anúncio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from client.api.base import ApiClient, Result

ADS_PATH = "/api/ads"


@dataclass(frozen=True, slots=True)
class StagedFile:
    """Arquivo de imagem selecionado no cliente, ainda não enviado."""

    filename: str
    content: bytes
    content_type: str


class AdsApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def list_all(self) -> Result[list[dict[str, Any]]]:
        return await self.client.request("GET", ADS_PATH)

    async def search(self, query: str) -> Result[list[dict[str, Any]]]:
        return await self.client.request("GET", f"{ADS_PATH}/search", params={"q": query})

    async def list_mine(self) -> Result[list[dict[str, Any]]]:
        return await self.client.request("GET", f"{ADS_PATH}/my", auth=True)

    async def get(self, ad_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("GET", f"{ADS_PATH}/{ad_id}")

    async def create(self, fields: dict[str, Any]) -> Result[dict[str, Any]]:
        return await self.client.request("POST", ADS_PATH, auth=True, json=fields)

    async def update(self, ad_id: str, fields: dict[str, Any]) -> Result[dict[str, Any]]:
        return await self.client.request("PUT", f"{ADS_PATH}/{ad_id}", auth=True, json=fields)

    async def delete(self, ad_id: str) -> Result[dict[str, Any]]:
        return await self.client.request("DELETE", f"{ADS_PATH}/{ad_id}", auth=True)

    async def list_images(self, ad_id: str) -> Result[list[str]]:
        result = await self.client.request("GET", f"{ADS_PATH}/{ad_id}/images")
        return result.map(lambda body: list(body.get("images", [])))

    async def upload_image(self, ad_id: str, file: StagedFile) -> Result[dict[str, Any]]:
        """Envia uma imagem; Ok traz `filename` e `path` gerados pelo servidor."""
        return await self.client.request(
            "POST",
            f"{ADS_PATH}/{ad_id}/images",
            auth=True,
            files={"image": (file.filename, file.content, file.content_type)},
        )

    async def delete_image(self, ad_id: str, filename: str) -> Result[dict[str, Any]]:
        """Remove uma imagem; imagem já ausente também é sucesso."""
        return await self.client.request(
            "DELETE", f"{ADS_PATH}/{ad_id}/images/{filename}", auth=True
        )
