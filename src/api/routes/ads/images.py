"""Endpoints de imagens de anúncio.

- GET /api/ads/{ad_id}/images
- POST /api/ads/{ad_id}/images (multipart, campo `image`)
- DELETE /api/ads/{ad_id}/images/{filename} (idempotente)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, File, UploadFile, status

from api.dependencies import get_container, get_current_user
from api.routes.uploads import read_upload
from app.bootstrap.dependencies import AppContainer
from app.domain.errors import InvalidUploadError
from app.domain.user import User

router = APIRouter()


@router.get("/{ad_id}/images")
async def list_images(
    ad_id: str,
    container: AppContainer = Depends(get_container),
) -> dict[str, list[str]]:
    return {"images": await container.ads.list_images(ad_id)}


@router.post("/{ad_id}/images", status_code=status.HTTP_201_CREATED)
async def upload_image(
    ad_id: str,
    image: UploadFile | None = File(None),
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    upload = await read_upload(image)
    if upload is None:
        raise InvalidUploadError("Nenhuma imagem enviada")

    filename = await container.ads.add_image(user, ad_id, upload)
    return {
        "message": "Imagem enviada com sucesso",
        "filename": filename,
        "path": container.ads.image_path(filename),
    }


@router.delete("/{ad_id}/images/{filename}")
async def delete_image(
    ad_id: str,
    filename: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    removed = await container.ads.remove_image(user, ad_id, filename)
    return {
        "message": "Imagem removida" if removed else "Imagem já havia sido removida",
        "filename": filename,
        "deleted": removed,
    }
