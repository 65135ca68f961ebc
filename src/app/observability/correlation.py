"""Contexto de rastreamento: correlation_id e interaction_id.

Ambos são injetados nos logs pelo filter de logging. Usa ContextVar para
ser async-safe; tasks de continuação herdam o contexto de quem as criou.

Uso:
    from app.observability import set_correlation_id, reset_correlation_id

    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        # processar request
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_interaction_id: ContextVar[str] = ContextVar("interaction_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def get_interaction_id() -> str:
    """Retorna o ID da interação Discord em processamento (vazio fora de uma)."""
    return _interaction_id.get()


def set_interaction_id(interaction_id: str | None) -> Token[str]:
    return _interaction_id.set(interaction_id or "")


def reset_interaction_id(token: Token[str]) -> None:
    _interaction_id.reset(token)
