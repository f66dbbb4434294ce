"""Erros de domínio do Onde Tem?.

Cada erro carrega o status HTTP correspondente; o handler registrado em
api/errors.py converte para `{"error": message}`.
"""

from __future__ import annotations


class OndeTemError(Exception):
    """Erro esperado, com mensagem segura para o usuário final."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailedError(OndeTemError):
    """Entrada rejeitada pela validação de campos."""

    status_code = 400

    def __init__(self, message: str, field_errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.field_errors = field_errors or {}


class InvalidUploadError(ValidationFailedError):
    """Arquivo enviado com tipo ou tamanho não aceito."""


class AuthenticationError(OndeTemError):
    """Token ausente, inválido, expirado ou credenciais incorretas."""

    status_code = 401


class PermissionDeniedError(OndeTemError):
    """Usuário autenticado sem permissão sobre o recurso."""

    status_code = 403


class NotFoundError(OndeTemError):
    """Recurso inexistente."""

    status_code = 404


class ConflictError(OndeTemError):
    """Recurso já existe ou limite atingido."""

    status_code = 409


class DuplicateEmailError(ConflictError):
    """E-mail já cadastrado por outro usuário."""

    def __init__(self, message: str = "Email já cadastrado") -> None:
        super().__init__(message)


class ImageLimitError(ConflictError):
    """Anúncio já possui o número máximo de imagens."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Limite de {limit} imagens por anúncio atingido")
        self.limit = limit
