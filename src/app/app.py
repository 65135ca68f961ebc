"""Entrypoint do serviço de interações Discord.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (com handlers próprios):
    from app.app import main

    def setup(registry):
        registry.register_global("ping", ping)

    main(configure_handlers=setup)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    get_continuation_scheduler,
    get_discord_http_client,
    get_handler_registry,
    get_interaction_public_key,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_server_settings
from utils.errors import KeyConversionError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from app.services.handler_registry import HandlerRegistry

    HandlerSetup = Callable[[HandlerRegistry], None]

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Converte a chave pública (falha rápido fora de development)

    Shutdown:
    - Aguarda continuações pendentes (cancela as que passarem do limite)
    - Fecha o pool HTTP compartilhado
    """
    base = get_base_settings()
    logger.info("app_starting", extra={"environment": base.environment})
    validate_runtime_settings()

    try:
        get_interaction_public_key()
    except KeyConversionError as exc:
        logger.error("public_key_invalid", extra={"reason": exc.detail})
        if not base.is_development:
            raise

    yield

    logger.info("app_shutting_down")
    await get_continuation_scheduler().drain(timeout_seconds=SHUTDOWN_DRAIN_SECONDS)
    await get_discord_http_client().aclose()


def create_app(configure_handlers: HandlerSetup | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        configure_handlers: Callback que registra handlers no registro
            compartilhado antes de servir.

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Discord Interactions",
        description="Endpoint de interações Discord (comandos, componentes e modais)",
        version="1.0.0",
        lifespan=lifespan,
        debug=base.debug,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )

    if configure_handlers is not None:
        configure_handlers(get_handler_registry())

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"handlers": get_handler_registry().counts()})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main(configure_handlers: HandlerSetup | None = None) -> None:
    """Sobe o servidor uvicorn (TLS quando TLS_CERT_FILE/TLS_KEY_FILE definidos)."""
    import uvicorn

    server = get_server_settings()
    asgi_app = app if configure_handlers is None else create_app(configure_handlers)

    logger.info(
        "server_starting",
        extra={"host": server.host, "port": server.port, "tls": server.tls_enabled},
    )
    uvicorn.run(
        asgi_app,
        host=server.host,
        port=server.port,
        ssl_certfile=server.tls_cert_file if server.tls_enabled else None,
        ssl_keyfile=server.tls_key_file if server.tls_enabled else None,
        log_config=None,
    )


if __name__ == "__main__":
    main()
