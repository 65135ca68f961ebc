"""Observabilidade — logs estruturados e métricas.

Re-exporta funções de contexto (correlation_id, interaction_id) e métricas
para uso em toda a aplicação.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_interaction
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    get_interaction_id,
    reset_correlation_id,
    reset_interaction_id,
    set_correlation_id,
    set_interaction_id,
)
from app.observability.metrics import (
    record_continuation,
    record_interaction,
    record_latency,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "get_interaction_id",
    "record_continuation",
    "record_interaction",
    "record_latency",
    "reset_correlation_id",
    "reset_interaction_id",
    "set_correlation_id",
    "set_interaction_id",
]
