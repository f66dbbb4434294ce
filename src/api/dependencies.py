"""Dependências FastAPI compartilhadas pelas rotas."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.bootstrap.dependencies import AppContainer
from app.domain.errors import AuthenticationError
from app.domain.user import User

MISSING_TOKEN = "Token de autenticação ausente"

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    """Container montado em create_app()."""
    return request.app.state.container


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: AppContainer = Depends(get_container),
) -> User:
    """Usuário do header `Authorization: Bearer <token>`.

    Raises:
        AuthenticationError: header ausente, token inválido/expirado ou
            usuário removido (401).
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(MISSING_TOKEN)
    return await container.accounts.resolve_token(credentials.credentials)
