"""Construção de validadores a partir de descritores de campo.

Uso:
    from forms import AD_FIELDS, build_schema

    schema = build_schema(AD_FIELDS)
    errors = schema.validate(values)     # {"title": "Obrigatório", ...}

Mensagens em português, uma por campo (a primeira regra violada).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any
from urllib.parse import urlparse

from forms.fields import (
    Checkbox,
    Date,
    Email,
    FieldDescriptor,
    Password,
    Select,
    Text,
    Textarea,
    Url,
)

REQUIRED_MESSAGE = "Obrigatório"
EMAIL_MESSAGE = "Email inválido"
URL_MESSAGE = "Informe uma URL válida (ex: https://www.site.com)"
DATE_MESSAGE = "Data inválida"
OPTION_MESSAGE = "Opção inválida"
PASSWORD_MISMATCH_MESSAGE = "Senhas não coincidem"

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FieldValidator = Callable[[Any, Mapping[str, Any]], str | None]


def min_length_message(size: int) -> str:
    return f"Mínimo de {size} caracteres"


def max_length_message(size: int) -> str:
    return f"Máximo de {size} caracteres"


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def build_validator(descriptor: FieldDescriptor, *, creating: bool = True) -> FieldValidator:
    """Retorna o validador da variante do descritor.

    Args:
        descriptor: Descritor de campo
        creating: False em formulários de edição (senha passa a ser opcional)

    Raises:
        TypeError: variante de descritor sem validador.
    """
    if isinstance(descriptor, Text):
        return _text_validator(descriptor)
    if isinstance(descriptor, Textarea):
        return _textarea_validator(descriptor)
    if isinstance(descriptor, Email):
        return _email_validator(descriptor)
    if isinstance(descriptor, Password):
        return _password_validator(descriptor, creating=creating)
    if isinstance(descriptor, Checkbox):
        return _checkbox_validator(descriptor)
    if isinstance(descriptor, Select):
        return _select_validator(descriptor)
    if isinstance(descriptor, Url):
        return _url_validator(descriptor)
    if isinstance(descriptor, Date):
        return _date_validator(descriptor)
    raise TypeError(f"Descritor de campo não suportado: {type(descriptor).__name__}")


def _length_error(value: str, min_length: int | None, max_length: int | None) -> str | None:
    size = len(value.strip())
    if min_length is not None and size < min_length:
        return min_length_message(min_length)
    if max_length is not None and size > max_length:
        return max_length_message(max_length)
    return None


def _text_validator(descriptor: Text) -> FieldValidator:
    pattern = re.compile(descriptor.pattern) if descriptor.pattern else None

    def validate(value: Any, _values: Mapping[str, Any]) -> str | None:
        if is_blank(value):
            return REQUIRED_MESSAGE if descriptor.required else None
        text = str(value)
        error = _length_error(text, descriptor.min_length, descriptor.max_length)
        if error:
            return error
        if pattern is not None and not pattern.fullmatch(text.strip()):
            return descriptor.pattern_error
        return None

    return validate


def _textarea_validator(descriptor: Textarea) -> FieldValidator:
    def validate(value: Any, _values: Mapping[str, Any]) -> str | None:
        if is_blank(value):
            return REQUIRED_MESSAGE if descriptor.required else None
        return _length_error(str(value), descriptor.min_length, descriptor.max_length)

    return validate


def _email_validator(descriptor: Email) -> FieldValidator:
    def validate(value: Any, _values: Mapping[str, Any]) -> str | None:
        if is_blank(value):
            return REQUIRED_MESSAGE if descriptor.required else None
        text = str(value).strip()
        if len(text) > descriptor.max_length:
            return max_length_message(descriptor.max_length)
        if not _EMAIL_RE.match(text):
            return EMAIL_MESSAGE
        return None

    return validate


def _password_validator(descriptor: Password, *, creating: bool) -> FieldValidator:
    required = descriptor.required and creating

    def validate(value: Any, values: Mapping[str, Any]) -> str | None:
        if descriptor.matches is not None:
            other = values.get(descriptor.matches)
            if is_blank(value):
                return None if is_blank(other) else REQUIRED_MESSAGE
            return None if value == other else PASSWORD_MISMATCH_MESSAGE

        if is_blank(value):
            return REQUIRED_MESSAGE if required else None
        return _length_error(str(value), descriptor.min_length, descriptor.max_length)

    return validate


def _checkbox_validator(descriptor: Checkbox) -> FieldValidator:
    def validate(value: Any, _values: Mapping[str, Any]) -> str | None:
        checked = value is True or (isinstance(value, str) and value.lower() in ("true", "on", "1"))
        if descriptor.required and not checked:
            return REQUIRED_MESSAGE
        return None

    return validate


def _select_validator(descriptor: Select) -> FieldValidator:
    allowed = descriptor.values

    def validate(value: Any, _values: Mapping[str, Any]) -> str | None:
        if is_blank(value):
            return REQUIRED_MESSAGE if descriptor.required else None
        return None if str(value) in allowed else OPTION_MESSAGE

    return validate


def _url_validator(descriptor: Url) -> FieldValidator:
    def validate(value: Any, _values: Mapping[str, Any]) -> str | None:
        if is_blank(value):
            return REQUIRED_MESSAGE if descriptor.required else None
        text = str(value).strip()
        if len(text) > descriptor.max_length:
            return max_length_message(descriptor.max_length)
        parsed = urlparse(text)
        if parsed.scheme not in ("http", "https") or "." not in parsed.netloc:
            return URL_MESSAGE
        return None

    return validate


def _parse_date(value: Any) -> date | None:
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def _date_validator(descriptor: Date) -> FieldValidator:
    def validate(value: Any, values: Mapping[str, Any]) -> str | None:
        if is_blank(value):
            return REQUIRED_MESSAGE if descriptor.required else None
        parsed = _parse_date(value)
        if parsed is None:
            return DATE_MESSAGE
        if descriptor.not_before is not None:
            lower = values.get(descriptor.not_before)
            lower_date = None if is_blank(lower) else _parse_date(lower)
            if lower_date is not None and parsed < lower_date:
                return descriptor.not_before_error
        return None

    return validate


@dataclass(frozen=True)
class FormSchema:
    """Conjunto de validadores na ordem dos campos."""

    fields: tuple[FieldDescriptor, ...]
    validators: Mapping[str, FieldValidator]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def validate_field(self, name: str, values: Mapping[str, Any]) -> str | None:
        """Valida um campo (ex: no blur); None se válido ou desconhecido."""
        validator = self.validators.get(name)
        if validator is None:
            return None
        return validator(values.get(name), values)

    def validate(self, values: Mapping[str, Any], *, partial: bool = False) -> dict[str, str]:
        """Valida o formulário inteiro.

        Args:
            values: Valores por nome de campo
            partial: Valida apenas os campos presentes em `values` (PATCH/PUT)

        Returns:
            Erros por campo, na ordem dos descritores (vazio = válido).
        """
        errors: dict[str, str] = {}
        for descriptor in self.fields:
            if partial and descriptor.name not in values:
                continue
            error = self.validators[descriptor.name](values.get(descriptor.name), values)
            if error:
                errors[descriptor.name] = error
        return errors


def build_schema(fields: Iterable[FieldDescriptor], *, creating: bool = True) -> FormSchema:
    """Monta o schema de um formulário a partir da tabela de descritores."""
    descriptors = tuple(fields)
    return FormSchema(
        fields=descriptors,
        validators={d.name: build_validator(d, creating=creating) for d in descriptors},
    )


def first_error(errors: Mapping[str, str], fields: Iterable[FieldDescriptor]) -> str:
    """Mensagem única para respostas de API: '<rótulo>: <erro>' do primeiro campo."""
    labels = {f.name: f.label for f in fields}
    name, message = next(iter(errors.items()))
    return f"{labels.get(name, name)}: {message}"
