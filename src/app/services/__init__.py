"""Serviços de aplicação.

Orquestração sobre os protocolos de app/protocols; as implementações
concretas de IO ficam em app/infra/.
"""

from app.services.accounts import AccountService
from app.services.ads import AdService
from app.services.engagement import CommentService, FavoriteService

__all__ = [
    "AccountService",
    "AdService",
    "CommentService",
    "FavoriteService",
]
