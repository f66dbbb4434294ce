"""Descritores de campo de formulário.

Cada variante carrega apenas as restrições que fazem sentido para ela.
`forms.validation.build_validator` trata todas as variantes; uma variante
nova sem tratamento lá falha com TypeError na construção do schema.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class _Field:
    name: str
    label: str
    required: bool = False


@dataclass(frozen=True, slots=True)
class Text(_Field):
    """Texto de uma linha, com limites de tamanho e padrão opcionais."""

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    pattern_error: str = "Formato inválido"


@dataclass(frozen=True, slots=True)
class Textarea(_Field):
    """Texto de várias linhas."""

    min_length: int | None = None
    max_length: int | None = None
    rows: int = 4


@dataclass(frozen=True, slots=True)
class Email(_Field):
    max_length: int = 255


@dataclass(frozen=True, slots=True)
class Password(_Field):
    """Senha; com `matches`, é a confirmação de outro campo de senha.

    `required` vale apenas na criação; em edição, senha vazia mantém a atual.
    """

    min_length: int | None = None
    max_length: int | None = None
    matches: str | None = None


@dataclass(frozen=True, slots=True)
class Checkbox(_Field):
    """Caixa de seleção; `required` exige que esteja marcada."""


@dataclass(frozen=True, slots=True)
class Option:
    value: str
    label: str


@dataclass(frozen=True, slots=True)
class Select(_Field):
    options: tuple[Option, ...] = field(default_factory=tuple)

    @property
    def values(self) -> frozenset[str]:
        return frozenset(option.value for option in self.options)


@dataclass(frozen=True, slots=True)
class Url(_Field):
    max_length: int = 255


@dataclass(frozen=True, slots=True)
class Date(_Field):
    """Data ISO (AAAA-MM-DD); `not_before` nomeia o campo que a limita."""

    not_before: str | None = None
    not_before_error: str = "Data final anterior à data inicial"


FieldDescriptor = Text | Textarea | Email | Password | Checkbox | Select | Url | Date


def empty_values(fields: Iterable[FieldDescriptor]) -> dict[str, Any]:
    """Valores iniciais de um formulário em branco."""
    return {f.name: False if isinstance(f, Checkbox) else "" for f in fields}
