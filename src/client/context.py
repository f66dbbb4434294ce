"""Composição do cliente: store, wrappers da API e consulta de CEP.

Uso:
    context = create_client_context()
    controller = context.ad_form(navigator, confirmer)
    await controller.initialize(ad_id)
    ...
    await context.aclose()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from client.api import AdsApi, ApiClient, AuthApi, CommentsApi, FavoritesApi, UsersApi
from client.controllers import AdDraftController, LoginController, UserFormController
from client.store import Store, create_store
from client.zipcode import ZipCodeLookup
from config.settings import get_client_settings, get_storage_settings

if TYPE_CHECKING:
    from client.controllers import Confirmer, Navigator
    from config.settings import ClientSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientContext:
    """Dependências compartilhadas pelas telas do cliente."""

    store: Store
    http: ApiClient
    auth: AuthApi
    users: UsersApi
    ads: AdsApi
    favorites: FavoritesApi
    comments: CommentsApi
    zipcode: ZipCodeLookup
    max_images_per_ad: int = 5

    def ad_form(self, navigator: Navigator, confirmer: Confirmer) -> AdDraftController:
        return AdDraftController(
            self.store,
            self.ads,
            self.zipcode,
            navigator,
            confirmer,
            max_images=self.max_images_per_ad,
        )

    def user_form(
        self,
        navigator: Navigator,
        user: dict[str, Any] | None = None,
    ) -> UserFormController:
        return UserFormController(self.store, self.users, navigator, user)

    def login_form(self, navigator: Navigator) -> LoginController:
        return LoginController(self.store, self.auth, navigator)

    async def aclose(self) -> None:
        await self.http.aclose()


def create_client_context(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ClientContext:
    """Monta o cliente a partir das settings (ambiente por padrão).

    Args:
        settings: Configurações do cliente
        transport: Transporte httpx alternativo (testes)
    """
    settings = settings or get_client_settings()
    errors = settings.validate()
    if errors:
        raise ValueError(f"Configuração do cliente inválida: {errors}")

    http = ApiClient(settings.api_base_url, transport=transport)
    logger.info("client_context_created", extra={"api_base_url": settings.api_base_url})
    return ClientContext(
        store=create_store(notification_timeout=settings.notification_timeout_seconds),
        http=http,
        auth=AuthApi(http),
        users=UsersApi(http),
        ads=AdsApi(http),
        favorites=FavoritesApi(http),
        comments=CommentsApi(http),
        zipcode=ZipCodeLookup(
            settings.zipcode_lookup_url,
            timeout_seconds=settings.zipcode_timeout_seconds,
            transport=transport,
        ),
        max_images_per_ad=get_storage_settings().max_images_per_ad,
    )
