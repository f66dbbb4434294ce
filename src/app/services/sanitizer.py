"""Sanitização de entrada e mascaramento de PII para logs.

Responsabilidade:
- Remover blocos <script>, handlers inline (onclick=...), URLs javascript:
  e caracteres de controle de textos enviados pelo usuário
- Mascarar e-mails antes de irem para os logs
- Determinismo: mesma entrada, mesma saída
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Any, Final

_SCRIPT_BLOCK: Final[Pattern[str]] = re.compile(
    r"<\s*script\b[^>]*>.*?<\s*/\s*script\s*>", re.IGNORECASE | re.DOTALL
)
_SCRIPT_TAG: Final[Pattern[str]] = re.compile(r"<\s*/?\s*script\b[^>]*>", re.IGNORECASE)
_EVENT_HANDLER: Final[Pattern[str]] = re.compile(
    r"\s+on[a-z]+\s*=\s*(\"[^\"]*\"|'[^']*'|[^\s>]+)", re.IGNORECASE
)
_JS_PROTOCOL: Final[Pattern[str]] = re.compile(r"javascript\s*:", re.IGNORECASE)
# Mantém \t, \n e \r
_CONTROL_CHARS: Final[Pattern[str]] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_EMAIL: Final[Pattern[str]] = re.compile(r"\b([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+)")


def sanitize_text(value: str) -> str:
    """Limpa um texto vindo do usuário.

    Exemplos:
        >>> sanitize_text("  Bolo <script>alert(1)</script>caseiro ")
        'Bolo caseiro'

        >>> sanitize_text('<a href="javascript:x()" onclick="y()">link</a>')
        '<a href="x()">link</a>'
    """
    if not value:
        return value

    result = _SCRIPT_BLOCK.sub("", value)
    result = _SCRIPT_TAG.sub("", result)
    result = _EVENT_HANDLER.sub("", result)
    result = _JS_PROTOCOL.sub("", result)
    result = _CONTROL_CHARS.sub("", result)
    return result.strip()


def sanitize_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Aplica sanitize_text a todos os valores str (um nível, recursivo em listas/dicts)."""
    return {key: _sanitize_value(value) for key, value in payload.items()}


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, dict):
        return sanitize_payload(value)
    if isinstance(value, list):
        return [_sanitize_value(item) for item in value]
    return value


def mask_email(email: str) -> str:
    """Mascara e-mail para logs.

    Exemplos:
        >>> mask_email("maria.silva@example.com")
        'm***@example.com'
    """
    if not email:
        return email
    return _EMAIL.sub(r"\1***@\2", email)
