"""Protocolo de persistência de usuários."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from app.domain.user import User


class UserStoreProtocol(ABC):
    """Contrato assíncrono para armazenamento de usuários.

    E-mails são comparados sem diferenciar maiúsculas; a implementação
    grava sempre em minúsculas.
    """

    @abstractmethod
    async def list_all(self) -> list[User]: ...

    @abstractmethod
    async def get(self, user_id: str) -> User | None: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    async def create(
        self,
        *,
        full_name: str,
        nickname: str,
        email: str,
        password_hash: str,
        photo_path: str | None = None,
    ) -> User:
        """Cria usuário. Levanta DuplicateEmailError se o e-mail existir."""

    @abstractmethod
    async def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        """Atualiza colunas informadas; None se o usuário não existir."""

    @abstractmethod
    async def delete(self, user_id: str) -> bool: ...
