"""Endpoints de favoritos (todos exigem autenticação)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_container, get_current_user
from app.bootstrap.dependencies import AppContainer
from app.domain.errors import NotFoundError
from app.domain.user import User

router = APIRouter()


@router.get("")
async def list_favorites(
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, Any]]:
    return [ad.to_dict() for ad in await container.favorites.list_ads(user)]


@router.get("/ids")
async def list_favorite_ids(
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, list[str]]:
    return {"ids": await container.favorites.list_ids(user)}


@router.post("/{ad_id}")
async def add_favorite(
    ad_id: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> JSONResponse:
    if await container.favorites.add(user, ad_id):
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={"message": "Anúncio adicionado aos favoritos", "adId": ad_id},
        )
    return JSONResponse(content={"message": "Anúncio já está nos favoritos", "adId": ad_id})


@router.delete("/{ad_id}")
async def remove_favorite(
    ad_id: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    if not await container.favorites.remove(user, ad_id):
        raise NotFoundError("Favorito não encontrado")
    return {"message": "Anúncio removido dos favoritos", "adId": ad_id}


@router.get("/{ad_id}/check")
async def check_favorite(
    ad_id: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    return {"isFavorite": await container.favorites.is_favorite(user, ad_id)}
