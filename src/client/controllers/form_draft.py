"""Estado de um formulário em edição: valores, snapshot, erros e toques.

Erros de validação vêm do schema de `forms`; erros assíncronos (ex: CEP
não encontrado) ficam à parte e têm precedência enquanto não houver erro
de validação no mesmo campo.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from forms import FieldDescriptor, build_schema, empty_values


class FormDraft:
    def __init__(self, fields: tuple[FieldDescriptor, ...], *, creating: bool = True) -> None:
        self._fields = fields
        self._schema = build_schema(fields, creating=creating)
        self._values: dict[str, Any] = {}
        self._snapshot: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._async_errors: dict[str, str] = {}
        self._status: dict[str, str] = {}
        self._touched: set[str] = set()
        self.reset()

    @property
    def field_names(self) -> tuple[str, ...]:
        return self._schema.field_names

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    @property
    def snapshot(self) -> dict[str, Any]:
        return dict(self._snapshot)

    @property
    def errors(self) -> dict[str, str]:
        """Erro corrente por campo (validação primeiro, depois assíncrono)."""
        merged = {**self._async_errors, **self._errors}
        return {name: merged[name] for name in self.field_names if name in merged}

    @property
    def visible_errors(self) -> dict[str, str]:
        """Somente erros de campos já tocados (o que a tela exibe)."""
        return {name: msg for name, msg in self.errors.items() if name in self._touched}

    @property
    def touched(self) -> frozenset[str]:
        return frozenset(self._touched)

    @property
    def is_dirty(self) -> bool:
        return self._values != self._snapshot

    def reset(self, values: Mapping[str, Any] | None = None) -> None:
        """Recomeça o formulário; `values` vira o novo snapshot."""
        base = empty_values(self._fields)
        for name, value in (values or {}).items():
            if name in base:
                base[name] = "" if value is None else value
        self._values = base
        self._snapshot = dict(base)
        self._errors = {}
        self._async_errors = {}
        self._status = {}
        self._touched = set()

    def get(self, name: str) -> Any:
        return self._values[name]

    def set(self, name: str, value: Any) -> None:
        """Altera um campo e revalida ele e os demais campos já tocados.

        Raises:
            KeyError: campo inexistente no formulário.
        """
        if name not in self._values:
            raise KeyError(name)
        self._values[name] = value
        self._async_errors.pop(name, None)
        for field_name in {name, *self._touched}:
            self._validate(field_name)

    def touch(self, name: str) -> None:
        if name not in self._values:
            raise KeyError(name)
        self._touched.add(name)
        self._validate(name)

    def validate_all(self) -> dict[str, str]:
        """Valida tudo e marca todos os campos como tocados.

        Returns:
            Erros de validação por campo (erros assíncronos não bloqueiam).
        """
        self._touched = set(self.field_names)
        self._errors = self._schema.validate(self._values)
        return dict(self._errors)

    def set_async_error(self, name: str, message: str | None) -> None:
        if message:
            self._async_errors[name] = message
        else:
            self._async_errors.pop(name, None)

    def status(self, name: str) -> str | None:
        return self._status.get(name)

    def set_status(self, name: str, message: str | None) -> None:
        if message:
            self._status[name] = message
        else:
            self._status.pop(name, None)

    def _validate(self, name: str) -> None:
        error = self._schema.validate_field(name, self._values)
        if error:
            self._errors[name] = error
        else:
            self._errors.pop(name, None)
