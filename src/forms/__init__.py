"""Formulários: descritores de campo, validação e tabelas de campos.

Usado pelo backend (validação de requisições) e pelo cliente (erros
inline dos formulários).
"""

from forms.ad_fields import AD_FIELDS, RADIUS_OPTIONS
from forms.fields import (
    Checkbox,
    Date,
    Email,
    FieldDescriptor,
    Option,
    Password,
    Select,
    Text,
    Textarea,
    Url,
    empty_values,
)
from forms.user_fields import LOGIN_FIELDS, SIGNUP_FIELDS, USER_FIELD_COLUMNS, USER_FIELDS
from forms.validation import (
    EMAIL_MESSAGE,
    PASSWORD_MISMATCH_MESSAGE,
    REQUIRED_MESSAGE,
    FormSchema,
    build_schema,
    build_validator,
    first_error,
    is_blank,
)

__all__ = [
    "AD_FIELDS",
    "EMAIL_MESSAGE",
    "LOGIN_FIELDS",
    "PASSWORD_MISMATCH_MESSAGE",
    "RADIUS_OPTIONS",
    "REQUIRED_MESSAGE",
    "SIGNUP_FIELDS",
    "USER_FIELDS",
    "USER_FIELD_COLUMNS",
    "Checkbox",
    "Date",
    "Email",
    "FieldDescriptor",
    "FormSchema",
    "Option",
    "Password",
    "Select",
    "Text",
    "Textarea",
    "Url",
    "build_schema",
    "build_validator",
    "empty_values",
    "first_error",
    "is_blank",
]
