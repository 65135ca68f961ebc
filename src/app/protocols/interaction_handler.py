"""Protocolo de handlers de interação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from app.coordinators.discord.context import InteractionContext
    from app.domain import InteractionResponse


class InteractionHandlerProtocol(Protocol):
    """Handler registrado para um comando ou componente.

    Pode ser função async ou síncrona; recebe o contexto de execução e
    devolve a resposta síncrona da interação.
    """

    def __call__(
        self,
        ctx: InteractionContext,
    ) -> InteractionResponse | Awaitable[InteractionResponse]: ...
