"""Agregador de rotas — registra todos os routers sob /api.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.ads.router import router as ads_router
from api.routes.auth.router import router as auth_router
from api.routes.comments.router import router as comments_router
from api.routes.favorites.router import router as favorites_router
from api.routes.health.router import router as health_router
from api.routes.users.router import router as users_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter(prefix=API_PREFIX)

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
    api_router.include_router(users_router, prefix="/users", tags=["users"])
    api_router.include_router(ads_router, prefix="/ads", tags=["ads"])
    api_router.include_router(favorites_router, prefix="/favorites", tags=["favorites"])
    api_router.include_router(comments_router, prefix="/comments", tags=["comments"])

    return api_router
