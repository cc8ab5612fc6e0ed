"""Entrypoint da aplicação replydesk.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import get_services, initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from app.bootstrap.dependencies import Services

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _lifespan_for(injected: Services | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações (apenas sem serviços injetados)
        - Monta o grafo de serviços e semeia os modelos de IA

        Shutdown:
        - Fecha clientes HTTP e Redis
        """
        service_name = get_base_settings().service_name
        logger.info("app_starting", extra={"service": service_name})
        if injected is None:
            validate_runtime_settings()
        services = injected or get_services()

        app.state.services = services
        app.state.service_name = service_name
        app.state.storage_backend = services.storage_backend
        app.state.redis_client = services.redis_client
        app.state.openai_client = services.openai_client

        await services.reply_generation.seed_default_models()

        yield

        logger.info("app_shutting_down", extra={"service": service_name})
        await services.aclose()

    return lifespan


async def _correlation_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
    finally:
        reset_correlation_id(token)
    return response


def create_app(services: Services | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        services: Grafo de serviços pronto (testes); None monta a partir do ambiente

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="replydesk",
        description="Gestão de comentários e respostas de canais do YouTube",
        version="0.1.0",
        lifespan=_lifespan_for(services),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    base = get_base_settings()
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(_correlation_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": base.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    base = get_base_settings()
    uvicorn.run(
        "app.app:app",
        host=base.http_host,
        port=base.http_port,
        reload=base.is_development,
    )


if __name__ == "__main__":
    main()
