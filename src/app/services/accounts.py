"""Contas de usuário: cadastro, login, perfil e exclusão."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from app.domain.errors import (
    AuthenticationError,
    DuplicateEmailError,
    NotFoundError,
    PermissionDeniedError,
)
from app.infra.storage.local_storage import AD_IMAGES_FOLDER, USER_PHOTOS_FOLDER
from app.services.sanitizer import mask_email

if TYPE_CHECKING:
    from app.domain.upload import UploadedFile
    from app.domain.user import User
    from app.infra.security.passwords import PasswordHasher
    from app.infra.security.tokens import TokenService
    from app.protocols.ad_store import AdStoreProtocol
    from app.protocols.image_storage import ImageStorageProtocol
    from app.protocols.user_store import UserStoreProtocol

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciais inválidas"
USER_NOT_FOUND = "Usuário não encontrado"


class AccountService:
    """Orquestra store de usuários, hash de senha, tokens e fotos."""

    def __init__(
        self,
        users: UserStoreProtocol,
        ads: AdStoreProtocol,
        storage: ImageStorageProtocol,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._ads = ads
        self._storage = storage
        self._hasher = hasher
        self._tokens = tokens

    async def list_users(self) -> list[User]:
        return await self._users.list_all()

    async def get_user(self, user_id: str) -> User:
        user = await self._users.get(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    async def register(
        self,
        *,
        full_name: str,
        nickname: str,
        email: str,
        password: str,
        photo: UploadedFile | None = None,
    ) -> User:
        """Cria conta; e-mail duplicado levanta DuplicateEmailError (409)."""
        if await self._users.get_by_email(email) is not None:
            raise DuplicateEmailError()

        photo_path = await self._save_photo(photo) if photo else None
        try:
            user = await self._users.create(
                full_name=full_name,
                nickname=nickname,
                email=email,
                password_hash=self._hasher.hash(password),
                photo_path=photo_path,
            )
        except DuplicateEmailError:
            await self._delete_photo(photo_path)
            raise

        logger.info(
            "account_registered",
            extra={"user_id": user.id, "email_masked": mask_email(user.email)},
        )
        return user

    async def authenticate(self, email: str, password: str) -> tuple[str, User]:
        """Confere credenciais e emite token.

        Returns:
            (token, usuário)

        Raises:
            AuthenticationError: e-mail inexistente ou senha incorreta
                (mesma mensagem nos dois casos).
        """
        user = await self._users.get_by_email(email)
        if user is None or not self._hasher.verify(user.password_hash, password):
            logger.info("login_rejected", extra={"email_masked": mask_email(email)})
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self._tokens.issue(user.id, user.email)
        logger.info("login_succeeded", extra={"user_id": user.id})
        return token, user

    async def resolve_token(self, token: str) -> User:
        """Usuário dono de um token válido."""
        claims = self._tokens.verify(token)
        user = await self._users.get(claims.user_id)
        if user is None:
            raise AuthenticationError("Token inválido")
        return user

    async def update_profile(
        self,
        actor: User,
        user_id: str,
        changes: dict[str, Any],
        *,
        password: str | None = None,
        photo: UploadedFile | None = None,
    ) -> User:
        """Atualiza o próprio perfil.

        Args:
            actor: Usuário autenticado
            user_id: Perfil alvo (precisa ser o do próprio actor)
            changes: Colunas já validadas (full_name, nickname, email)
            password: Nova senha, quando informada
            photo: Nova foto; substitui e remove a anterior
        """
        _ensure_self(actor, user_id)
        current = await self.get_user(user_id)

        values = dict(changes)
        if "email" in values:
            other = await self._users.get_by_email(values["email"])
            if other is not None and other.id != user_id:
                raise DuplicateEmailError()
        if password:
            values["password_hash"] = self._hasher.hash(password)
        if photo is not None:
            values["photo_path"] = await self._save_photo(photo)

        updated = await self._users.update(user_id, values)
        if updated is None:
            raise NotFoundError(USER_NOT_FOUND)

        if photo is not None and current.photo_path:
            await self._delete_photo(current.photo_path)

        logger.info("account_updated", extra={"user_id": user_id, "fields": sorted(values)})
        return updated

    async def delete_account(self, actor: User, user_id: str) -> None:
        """Remove a conta, os anúncios (cascata no banco) e os arquivos."""
        _ensure_self(actor, user_id)
        user = await self.get_user(user_id)
        filenames = await self._ads.list_user_image_filenames(user_id)

        if not await self._users.delete(user_id):
            raise NotFoundError(USER_NOT_FOUND)

        for filename in filenames:
            await self._storage.delete(AD_IMAGES_FOLDER, filename)
        await self._delete_photo(user.photo_path)
        logger.info("account_deleted", extra={"user_id": user_id, "image_count": len(filenames)})

    async def _save_photo(self, photo: UploadedFile) -> str:
        filename = await self._storage.save(USER_PHOTOS_FOLDER, photo.content, photo.content_type)
        return self._storage.public_path(USER_PHOTOS_FOLDER, filename)

    async def _delete_photo(self, photo_path: str | None) -> None:
        if photo_path:
            await self._storage.delete(USER_PHOTOS_FOLDER, PurePosixPath(photo_path).name)


def _ensure_self(actor: User, user_id: str) -> None:
    if actor.id != user_id:
        raise PermissionDeniedError("Acesso negado")
