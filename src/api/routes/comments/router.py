"""Endpoints de comentários.

Leitura é pública; criar, editar e remover exigem autenticação e
edição/remoção só pelo autor.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from api.dependencies import get_container, get_current_user
from app.bootstrap.dependencies import AppContainer
from app.domain.user import User

router = APIRouter()


class CommentCreateRequest(BaseModel):
    ad_id: str = ""
    content: str = ""


class CommentUpdateRequest(BaseModel):
    content: str = ""


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(
    body: CommentCreateRequest,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    comment = await container.comments.create(user, body.ad_id, body.content)
    return {"message": "Comentário criado com sucesso", "comment": comment.to_dict()}


@router.get("/ad/{ad_id}")
async def list_ad_comments(
    ad_id: str,
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    comments = await container.comments.list_for_ad(ad_id)
    return {"comments": [c.to_dict() for c in comments], "count": len(comments)}


@router.get("/ad/{ad_id}/count")
async def count_ad_comments(
    ad_id: str,
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    return {"count": await container.comments.count_for_ad(ad_id)}


@router.get("/user")
async def list_user_comments(
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    comments = await container.comments.list_for_user(user)
    return {"comments": [c.to_dict() for c in comments], "count": len(comments)}


@router.put("/{comment_id}")
async def update_comment(
    comment_id: str,
    body: CommentUpdateRequest,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    comment = await container.comments.update(user, comment_id, body.content)
    return {"message": "Comentário atualizado com sucesso", "comment": comment.to_dict()}


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    await container.comments.delete(user, comment_id)
    return {"message": "Comentário removido com sucesso"}
