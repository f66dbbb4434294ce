"""Hash de senha com sal (scrypt via werkzeug)."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

DEFAULT_METHOD = "scrypt"


class PasswordHasher:
    """Gera e confere hashes de senha.

    O hash inclui método, parâmetros e sal; `verify` não precisa saber
    com qual configuração ele foi gerado.
    """

    __slots__ = ("_method",)

    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password_hash: str, password: str) -> bool:
        if not password_hash:
            return False
        return check_password_hash(password_hash, password)
