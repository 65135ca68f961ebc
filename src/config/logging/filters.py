"""Filters de logging para injeção de contexto.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- interaction_id: ID da interação Discord em processamento
- service: Nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _empty() -> str:
    return ""


class InteractionContextFilter(logging.Filter):
    """Injeta correlation_id, interaction_id e service em cada record.

    Valores passados explicitamente via `extra` têm precedência sobre o
    contexto atual.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
        interaction_id_getter: Função que retorna o interaction_id atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        interaction_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or _empty
        self._get_interaction_id = interaction_id_getter or _empty

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        if not getattr(record, "interaction_id", None):
            record.interaction_id = self._get_interaction_id()
        record.service = self._service_name
        return True
