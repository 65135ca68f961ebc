"""Helpers de logging para a API do Discord (sem tokens nem conteúdo)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_api_error(
    operation: str,
    method: str,
    status_code: int,
    message: str,
    discord_code: int | None = None,
) -> None:
    """Loga erro da API; a URL nunca é logada (contém o token da interação)."""
    logger.warning(
        "discord_api_error",
        extra={
            "operation": operation,
            "method": method,
            "status_code": status_code,
            "discord_code": discord_code,
            "error_message": message,
        },
    )


def log_success(operation: str, method: str, status_code: int) -> None:
    logger.debug(
        "discord_api_success",
        extra={
            "operation": operation,
            "method": method,
            "status_code": status_code,
        },
    )
