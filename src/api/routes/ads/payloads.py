"""Corpo JSON de criação/edição de anúncio."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, create_model

from app.domain.ad import AD_CONTENT_FIELDS
from app.domain.errors import ValidationFailedError
from app.services.sanitizer import sanitize_payload
from forms import AD_FIELDS, build_schema, first_error

# Um campo opcional por coluna de conteúdo; números viram texto
AdPayload: type[BaseModel] = create_model(
    "AdPayload",
    __config__=ConfigDict(extra="ignore", coerce_numbers_to_str=True),
    **{name: (str | None, None) for name in AD_CONTENT_FIELDS},
)

_ad_schema = build_schema(AD_FIELDS)


def clean_ad_fields(payload: BaseModel, *, partial: bool) -> dict[str, Any]:
    """Sanitiza e valida os campos enviados.

    Args:
        payload: Corpo recebido
        partial: Edição; valida apenas os campos presentes

    Raises:
        ValidationFailedError: algum campo inválido (400).
    """
    fields = sanitize_payload(payload.model_dump(exclude_unset=True))
    errors = _ad_schema.validate(fields, partial=partial)
    if errors:
        raise ValidationFailedError(first_error(errors, AD_FIELDS), errors)
    return fields
