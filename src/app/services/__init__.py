"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
"""

from app.services.handler_registry import GuildCommandEntry, HandlerRegistry

__all__ = [
    "GuildCommandEntry",
    "HandlerRegistry",
]
