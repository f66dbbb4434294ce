"""Entrypoint da aplicação Onde Tem?.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.errors import register_error_handlers
from api.middleware import correlation_middleware
from api.routes import create_api_router
from app.bootstrap import AppContainer, get_container, initialize_app, validate_runtime_settings
from app.infra.stores.database import create_schema
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)

UPLOADS_MOUNT = "/uploads"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria diretórios de upload e tabelas ausentes

    Shutdown:
    - Fecha o pool de conexões
    """
    container: AppContainer = app.state.container
    logger.info("app_starting", extra={"service": "onde-tem"})
    validate_runtime_settings()
    container.storage.ensure_folders()
    await create_schema(container.engine)

    yield

    logger.info("app_shutting_down", extra={"service": "onde-tem"})
    await container.dispose()


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        container: Dependências prontas; sem ele, monta a partir do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Onde Tem?",
        description="API de anúncios classificados",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.container = container or get_container()

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_middleware)
    register_error_handlers(fastapi_app)

    fastapi_app.include_router(create_api_router())
    fastapi_app.mount(
        UPLOADS_MOUNT,
        StaticFiles(directory=fastapi_app.state.container.storage.root, check_dir=False),
        name="uploads",
    )

    logger.info("app_configured", extra={"service": "onde-tem"})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    settings = get_base_settings()
    logger.info("app_dev_server_starting", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
