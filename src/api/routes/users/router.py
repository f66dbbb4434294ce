"""Endpoints de usuários.

Cadastro e edição recebem multipart/form-data (campo opcional `photo`).
Só o próprio usuário edita ou remove a sua conta.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from api.dependencies import get_container, get_current_user
from api.routes.uploads import read_upload
from app.bootstrap.dependencies import AppContainer
from app.domain.errors import ValidationFailedError
from app.domain.user import User
from app.services.sanitizer import sanitize_text
from forms import USER_FIELD_COLUMNS, USER_FIELDS, build_schema, first_error

router = APIRouter()

_create_schema = build_schema(USER_FIELDS)
_update_schema = build_schema(USER_FIELDS, creating=False)


def _validate(values: dict[str, Any], *, partial: bool) -> None:
    schema = _update_schema if partial else _create_schema
    errors = schema.validate(values, partial=partial)
    if errors:
        raise ValidationFailedError(first_error(errors, USER_FIELDS), errors)


@router.get("")
async def list_users(container: AppContainer = Depends(get_container)) -> list[dict[str, Any]]:
    users = await container.accounts.list_users()
    return [user.to_public_dict() for user in users]


@router.get("/me")
async def get_me(user: User = Depends(get_current_user)) -> dict[str, Any]:
    return user.to_public_dict()


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    user = await container.accounts.get_user(user_id)
    return user.to_public_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    full_name: str = Form("", alias="fullName"),
    nickname: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    photo: UploadFile | None = File(None),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    values = {
        "fullName": sanitize_text(full_name),
        "nickname": sanitize_text(nickname),
        "email": email.strip(),
        "password": password,
    }
    _validate(values, partial=False)

    user = await container.accounts.register(
        full_name=values["fullName"],
        nickname=values["nickname"],
        email=values["email"],
        password=password,
        photo=await read_upload(photo),
    )
    return {"message": "Usuário criado com sucesso", "userId": user.id}


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    full_name: str | None = Form(None, alias="fullName"),
    nickname: str | None = Form(None),
    email: str | None = Form(None),
    password: str | None = Form(None),
    photo: UploadFile | None = File(None),
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if full_name is not None:
        values["fullName"] = sanitize_text(full_name)
    if nickname is not None:
        values["nickname"] = sanitize_text(nickname)
    if email is not None:
        values["email"] = email.strip()
    if password:
        values["password"] = password
    _validate(values, partial=True)

    changes = {column: values[name] for name, column in USER_FIELD_COLUMNS.items() if name in values}
    updated = await container.accounts.update_profile(
        user,
        user_id,
        changes,
        password=values.get("password"),
        photo=await read_upload(photo),
    )
    return updated.to_public_dict()


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    user: User = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    await container.accounts.delete_account(user, user_id)
    return {"message": "Usuário removido com sucesso"}
