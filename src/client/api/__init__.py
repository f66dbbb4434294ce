"""Wrappers tipados da API HTTP do Onde Tem?."""

from client.api.ads import AdsApi, StagedFile
from client.api.auth import AuthApi
from client.api.base import (
    DEFAULT_ERROR_MESSAGES,
    NOT_AUTHENTICATED_MESSAGE,
    ApiClient,
    ApiError,
    ApiErrorKind,
    Err,
    Ok,
    Result,
    default_error_message,
    error_kind_for_status,
)
from client.api.comments import CommentsApi
from client.api.favorites import FavoritesApi
from client.api.users import UsersApi

__all__ = [
    "DEFAULT_ERROR_MESSAGES",
    "NOT_AUTHENTICATED_MESSAGE",
    "AdsApi",
    "ApiClient",
    "ApiError",
    "ApiErrorKind",
    "AuthApi",
    "CommentsApi",
    "Err",
    "FavoritesApi",
    "Ok",
    "Result",
    "StagedFile",
    "UsersApi",
    "default_error_message",
    "error_kind_for_status",
]
