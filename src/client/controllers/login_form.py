"""Controller do formulário de login."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from client.api.base import Ok
from client.controllers.form_draft import FormDraft
from client.controllers.navigation import HOME_PATH, SIGNUP_PATH
from client.store import auth
from forms import LOGIN_FIELDS

if TYPE_CHECKING:
    from client.api.auth import AuthApi
    from client.controllers.navigation import Navigator
    from client.store.core import Store


class LoginController:
    def __init__(self, store: Store, api: AuthApi, navigator: Navigator) -> None:
        self._store = store
        self._api = api
        self._navigator = navigator
        self._draft = FormDraft(LOGIN_FIELDS)
        self._submitting = False

    @property
    def draft(self) -> FormDraft:
        return self._draft

    @property
    def errors(self) -> dict[str, str]:
        return self._draft.visible_errors

    @property
    def submitting(self) -> bool:
        return self._submitting

    def update_field(self, name: str, value: Any) -> None:
        self._draft.set(name, value)

    async def submit(self) -> bool:
        """Autentica; em caso de sucesso vai para a home.

        Na falha a mensagem do servidor (ex: "Credenciais inválidas") é
        notificada pelo slice e repetida nos dois campos; a rota não muda.
        """
        if self._submitting or self._draft.validate_all():
            return False

        self._submitting = True
        try:
            values = self._draft.values
            result = await auth.login(
                self._store, self._api, str(values["email"]).strip(), str(values["password"])
            )
        finally:
            self._submitting = False

        if not isinstance(result, Ok):
            message = self._store.select(auth.NAME).error
            self._draft.set_async_error("email", message)
            self._draft.set_async_error("password", message)
            return False

        self._navigator.navigate(HOME_PATH)
        return True

    def cancel(self) -> None:
        self._navigator.navigate(HOME_PATH)

    def go_to_signup(self) -> None:
        self._navigator.navigate(SIGNUP_PATH)
