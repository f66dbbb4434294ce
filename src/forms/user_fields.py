"""Tabelas de campos dos formulários de usuário, cadastro e login."""

from __future__ import annotations

from forms.fields import Checkbox, Email, FieldDescriptor, Password, Text

USER_FIELDS: tuple[FieldDescriptor, ...] = (
    Text("fullName", "Nome Completo", required=True, min_length=3, max_length=100),
    Text("nickname", "Primeiro nome ou apelido", required=True, min_length=3, max_length=50),
    Email("email", "Email", required=True),
    Password("password", "Senha", required=True, min_length=3, max_length=100),
)

SIGNUP_FIELDS: tuple[FieldDescriptor, ...] = (
    *USER_FIELDS,
    Password("confirmpassword", "Confirme a senha", matches="password"),
    Checkbox("useragreement", "Li e aceito os termos de uso", required=True),
)

LOGIN_FIELDS: tuple[FieldDescriptor, ...] = (
    Email("email", "Email", required=True),
    Password("password", "Senha", required=True),
)

# Nomes do formulário -> colunas da tabela users
USER_FIELD_COLUMNS: dict[str, str] = {
    "fullName": "full_name",
    "nickname": "nickname",
    "email": "email",
}
