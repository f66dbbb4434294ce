"""Controller do formulário de usuário: cadastro e edição do perfil."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from client.api.base import Ok
from client.controllers.form_draft import FormDraft
from client.controllers.navigation import HOME_PATH
from client.store import users
from forms import SIGNUP_FIELDS

if TYPE_CHECKING:
    from client.api.ads import StagedFile
    from client.api.users import UsersApi
    from client.controllers.navigation import Navigator
    from client.store.core import Store

# Edição de perfil: sem aceite de termos, senha opcional
PROFILE_FIELDS = tuple(f for f in SIGNUP_FIELDS if f.name != "useragreement")


@dataclass(frozen=True, slots=True)
class UserFormOutcome:
    success: bool
    user_id: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)


class UserFormController:
    """Cadastro (sem `user`) ou edição do perfil de `user`."""

    def __init__(
        self,
        store: Store,
        api: UsersApi,
        navigator: Navigator,
        user: dict[str, Any] | None = None,
    ) -> None:
        self._store = store
        self._api = api
        self._navigator = navigator
        self._user = user
        if user is None:
            self._draft = FormDraft(SIGNUP_FIELDS)
        else:
            self._draft = FormDraft(PROFILE_FIELDS, creating=False)
            self._draft.reset(user)
        self._photo: StagedFile | None = None

    @property
    def is_new_user(self) -> bool:
        return self._user is None

    @property
    def draft(self) -> FormDraft:
        return self._draft

    @property
    def errors(self) -> dict[str, str]:
        return self._draft.visible_errors

    @property
    def photo(self) -> StagedFile | None:
        return self._photo

    def update_field(self, name: str, value: Any) -> None:
        self._draft.set(name, value)

    def blur_field(self, name: str) -> None:
        self._draft.touch(name)

    def set_photo(self, photo: StagedFile | None) -> None:
        self._photo = photo

    async def submit(self) -> UserFormOutcome:
        field_errors = self._draft.validate_all()
        if field_errors:
            return UserFormOutcome(success=False, field_errors=field_errors)

        values = self._draft.values
        if self._user is None:
            result = await users.create_user(self._store, self._api, values, self._photo)
            if not isinstance(result, Ok):
                return UserFormOutcome(success=False)
            self._draft.reset()
            self._photo = None
            return UserFormOutcome(success=True, user_id=result.value.get("userId"))

        result = await users.update_user(
            self._store, self._api, self._user["id"], values, self._photo
        )
        if not isinstance(result, Ok):
            return UserFormOutcome(success=False, user_id=self._user["id"])
        self._user = result.value
        self._draft.reset(result.value)
        self._photo = None
        return UserFormOutcome(success=True, user_id=self._user["id"])

    def cancel(self) -> None:
        self._navigator.navigate(HOME_PATH)
