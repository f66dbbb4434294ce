"""Modelos e erros de domínio."""

from app.domain.ad import AD_CONTENT_FIELDS, Ad
from app.domain.comment import MAX_COMMENT_LENGTH, Comment
from app.domain.errors import (
    AuthenticationError,
    ConflictError,
    DuplicateEmailError,
    ImageLimitError,
    InvalidUploadError,
    NotFoundError,
    OndeTemError,
    PermissionDeniedError,
    ValidationFailedError,
)
from app.domain.upload import UploadedFile
from app.domain.user import User

__all__ = [
    "AD_CONTENT_FIELDS",
    "MAX_COMMENT_LENGTH",
    "Ad",
    "AuthenticationError",
    "Comment",
    "ConflictError",
    "DuplicateEmailError",
    "ImageLimitError",
    "InvalidUploadError",
    "NotFoundError",
    "OndeTemError",
    "PermissionDeniedError",
    "UploadedFile",
    "User",
    "ValidationFailedError",
]
