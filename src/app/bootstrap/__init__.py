"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas (cliente REST, registro, dispatcher).

Uso:
    from app.bootstrap import initialize_app, get_handler_registry

    # Na inicialização do serviço
    initialize_app()

    # Registrar handlers antes de servir
    get_handler_registry().register_global("ping", ping_handler)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.discord.signature import load_public_key
from app.observability import get_correlation_id, get_interaction_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_discord_settings, get_server_settings

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

    from api.connectors.discord.http_client import DiscordHttpClient
    from app.coordinators.discord import ContinuationScheduler, InteractionDispatcher
    from app.services.handler_registry import HandlerRegistry

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com correlation_id e interaction_id
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
        interaction_id_getter=get_interaction_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"server: {error}" for error in get_server_settings().validate())
    errors.extend(f"discord: {error}" for error in get_discord_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Singletons (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_interaction_public_key() -> Ed25519PublicKey:
    """Chave pública Ed25519 da aplicação, convertida uma única vez.

    Raises:
        KeyConversionError: DISCORD_PUBLIC_KEY ausente ou inválida.
    """
    return load_public_key(get_discord_settings().public_key)


@lru_cache(maxsize=1)
def get_discord_http_client() -> DiscordHttpClient:
    """Cliente REST compartilhado (singleton)."""
    from app.bootstrap.discord_factory import create_rest_client

    return create_rest_client(get_discord_settings())


@lru_cache(maxsize=1)
def get_handler_registry() -> HandlerRegistry:
    """Registro de handlers (singleton)."""
    from app.bootstrap.discord_factory import create_handler_registry

    return create_handler_registry(get_discord_settings(), get_discord_http_client())


@lru_cache(maxsize=1)
def get_continuation_scheduler() -> ContinuationScheduler:
    """Agendador de continuações deferred (singleton)."""
    from app.bootstrap.discord_factory import create_continuation_scheduler

    return create_continuation_scheduler(get_discord_settings())


@lru_cache(maxsize=1)
def get_interaction_dispatcher() -> InteractionDispatcher:
    """Dispatcher de interações (singleton)."""
    from app.bootstrap.discord_factory import create_interaction_dispatcher

    return create_interaction_dispatcher(
        get_discord_settings(),
        get_handler_registry(),
        get_discord_http_client(),
        get_continuation_scheduler(),
    )
