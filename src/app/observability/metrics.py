"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo sistema de logs.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Interações: contador por tipo de interação e status HTTP devolvido
- Continuações: contador de entregas deferred por resultado

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("dispatcher", "dispatch", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "dispatcher", "discord_rest")
        operation: Nome da operação (ex: "dispatch", "edit_original")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (default: contexto atual)
    """
    extra: dict[str, str | float] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_interaction(interaction_type: str, status_code: int) -> None:
    """Contabiliza uma interação respondida."""
    logger.info(
        "metric_interaction",
        extra={
            "metric_type": "counter",
            "component": "interactions",
            "interaction_type": interaction_type,
            "status_code": status_code,
        },
    )


def record_continuation(outcome: str, delivery: str) -> None:
    """Contabiliza o resultado de uma continuação deferred.

    Args:
        outcome: "delivered", "skipped", "work_failed" ou "delivery_failed"
        delivery: Modo de entrega ("edit_original" ou "followup")
    """
    logger.info(
        "metric_continuation",
        extra={
            "metric_type": "counter",
            "component": "continuations",
            "outcome": outcome,
            "delivery": delivery,
        },
    )
