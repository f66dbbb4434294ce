"""Endpoints de autenticação.

Endpoints:
- POST /api/auth/login: troca e-mail/senha por token
- POST /api/auth/logout: encerra sessão (token é descartado pelo cliente)
- GET /api/auth/me: usuário dono do token
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_container, get_current_user
from app.bootstrap.dependencies import AppContainer
from app.domain.errors import ValidationFailedError
from app.domain.user import User
from forms import LOGIN_FIELDS, build_schema, first_error

router = APIRouter()

_login_schema = build_schema(LOGIN_FIELDS)


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


@router.post("/login")
async def login(
    body: LoginRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    values = {"email": body.email.strip(), "password": body.password}
    errors = _login_schema.validate(values)
    if errors:
        raise ValidationFailedError(first_error(errors, LOGIN_FIELDS), errors)

    token, user = await container.accounts.authenticate(values["email"], values["password"])
    return {"token": token, "user": user.to_public_dict()}


@router.post("/logout")
async def logout() -> dict[str, str]:
    return {"message": "Logout realizado com sucesso"}


@router.get("/me")
async def current_user(user: User = Depends(get_current_user)) -> dict[str, Any]:
    return user.to_public_dict()
