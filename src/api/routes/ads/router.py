"""Endpoints de anúncios.

Endpoints:
- GET /api/ads: todos, mais recentes primeiro
- GET /api/ads/search?q=: busca textual
- GET /api/ads/my: anúncios do usuário autenticado
- GET/PUT/DELETE /api/ads/{ad_id}
- POST /api/ads
- Imagens: ver api/routes/ads/images.py
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from api.dependencies import get_container, get_current_user
from api.routes.ads.images import router as images_router
from api.routes.ads.payloads import AdPayload, clean_ad_fields
from app.bootstrap.dependencies import AppContainer
from app.domain.user import User

router = APIRouter()


@router.get("")
async def list_ads(container: AppContainer = Depends(get_container)) -> list[dict[str, Any]]:
    return [ad.to_dict() for ad in await container.ads.list_all()]


@router.get("/search")
async def search_ads(
    q: str = "",
    container: AppContainer = Depends(get_container),
) -> list[dict[str, Any]]:
    return [ad.to_dict() for ad in await container.ads.search(q)]


@router.get("/my")
async def list_my_ads(
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, Any]]:
    return [ad.to_dict() for ad in await container.ads.list_for_user(user.id)]


@router.get("/{ad_id}")
async def get_ad(ad_id: str, container: AppContainer = Depends(get_container)) -> dict[str, Any]:
    return (await container.ads.get(ad_id)).to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_ad(
    payload: AdPayload,  # type: ignore[valid-type]
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    fields = clean_ad_fields(payload, partial=False)
    ad = await container.ads.create(user, fields)
    return ad.to_dict()


@router.put("/{ad_id}")
async def update_ad(
    ad_id: str,
    payload: AdPayload,  # type: ignore[valid-type]
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    fields = clean_ad_fields(payload, partial=True)
    ad = await container.ads.update(user, ad_id, fields)
    return ad.to_dict()


@router.delete("/{ad_id}")
async def delete_ad(
    ad_id: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    await container.ads.delete(user, ad_id)
    return {"message": "Anúncio removido"}


router.include_router(images_router)
