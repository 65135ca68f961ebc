"""Coordenação de interações Discord: despacho, contexto e continuações."""

from app.coordinators.discord.context import InteractionContext
from app.coordinators.discord.continuations import (
    ContinuationScheduler,
    DeferredContinuation,
    DeliveryMode,
)
from app.coordinators.discord.dispatcher import InteractionDispatcher

__all__ = [
    "ContinuationScheduler",
    "DeferredContinuation",
    "DeliveryMode",
    "InteractionContext",
    "InteractionDispatcher",
]
