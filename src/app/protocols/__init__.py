"""Protocolos e contratos do core da aplicação."""

from .ad_store import AdStoreProtocol
from .comment_store import CommentStoreProtocol
from .favorite_store import FavoriteStoreProtocol
from .image_storage import ImageStorageProtocol
from .user_store import UserStoreProtocol

__all__ = [
    "AdStoreProtocol",
    "CommentStoreProtocol",
    "FavoriteStoreProtocol",
    "ImageStorageProtocol",
    "UserStoreProtocol",
]
