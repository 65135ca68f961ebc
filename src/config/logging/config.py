"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="discord-interactions")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("interaction_dispatched", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import InteractionContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "discord-interactions"

QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    interaction_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do contexto.
        interaction_id_getter: Função que retorna o interaction_id do contexto.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        InteractionContextFilter(service_name, correlation_id_getter, interaction_id_getter)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    # uvicorn instala handlers próprios; unifica no root
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True

    # httpx loga a URL completa em INFO; URLs de webhook contêm o token da interação
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service, correlation_id e interaction_id.
    """
    return logging.getLogger(name)
