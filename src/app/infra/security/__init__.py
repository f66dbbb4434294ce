"""Segurança: hash de senha e tokens de sessão."""

from app.infra.security.passwords import PasswordHasher
from app.infra.security.tokens import TokenClaims, TokenService

__all__ = [
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
]
