"""Colaboradores de interface injetados nos controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod

HOME_PATH = "/"
LOGIN_PATH = "/login"
NEW_AD_PATH = "/ad"
SIGNUP_PATH = "/user"


def edit_ad_path(ad_id: str) -> str:
    return f"/ad/{ad_id}/edit"


class Navigator(ABC):
    """Troca a rota atual do cliente."""

    @abstractmethod
    def navigate(self, path: str) -> None:
        ...


class Confirmer(ABC):
    """Pergunta sim/não ao usuário (ex: diálogo de confirmação)."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        ...
