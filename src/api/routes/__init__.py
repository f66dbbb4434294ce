"""Rotas HTTP da API.

Estrutura por recurso:
- routes/auth/: login, logout, usuário atual
- routes/users/: cadastro e perfil
- routes/ads/: anúncios e imagens
- routes/favorites/: favoritos
- routes/comments/: comentários
- routes/health/: liveness e readiness

Agregação:
- router.py: registra todos os routers sob /api
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
