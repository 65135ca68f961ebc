"""Despacho de interações autenticadas para os handlers registrados.

Fluxo:
1. PING → PONG, sem consulta ao registro
2. APPLICATION_COMMAND → guild (ID remoto) e depois global (nome)
3. MESSAGE_COMPONENT / MODAL_SUBMIT → componente (custom_id)
4. Handler recebe InteractionContext; exceções viram HandlerFailedError
5. Resposta deferred sem continuação agendada é rejeitada
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING

from app.coordinators.discord.context import InteractionContext
from app.domain import InteractionResponse, InteractionResponseType, InteractionType
from app.observability import record_latency
from utils.errors import (
    DeferredWithoutContinuationError,
    HandlerFailedError,
    HandlerTimeoutError,
    MissingInteractionDataError,
    NoHandlerFoundError,
)

if TYPE_CHECKING:
    from app.coordinators.discord.continuations import ContinuationScheduler
    from app.domain import Interaction
    from app.protocols.discord_rest import DiscordRestProtocol
    from app.protocols.interaction_handler import InteractionHandlerProtocol
    from app.services.handler_registry import HandlerRegistry

logger = logging.getLogger(__name__)


class InteractionDispatcher:
    """Roteia interações e aplica o contrato de resposta dos handlers.

    Args:
        registry: Tabela de handlers
        rest: Cliente REST exposto no contexto
        scheduler: Agendador de continuações deferred
        handler_timeout_seconds: Limite da fase síncrona do handler (None = sem limite)
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        rest: DiscordRestProtocol,
        scheduler: ContinuationScheduler,
        handler_timeout_seconds: float | None = None,
    ) -> None:
        self._registry = registry
        self._rest = rest
        self._scheduler = scheduler
        self._handler_timeout = handler_timeout_seconds

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    async def dispatch(self, interaction: Interaction) -> InteractionResponse:
        """Produz a resposta síncrona para a interação.

        Raises:
            DispatchError: Handler ausente, dados ausentes, falha ou timeout
                do handler, ou deferred sem continuação.
        """
        if interaction.type == InteractionType.PING:
            return InteractionResponse(type=InteractionResponseType.PONG)

        handler, key = self._resolve(interaction)
        ctx = InteractionContext(interaction, self._rest, self._registry, self._scheduler)

        started_at = time.perf_counter()
        response = await self._invoke(handler, ctx, key)
        record_latency("dispatcher", "handler", (time.perf_counter() - started_at) * 1000)

        if response.type.is_deferred and not ctx.continuation_scheduled:
            logger.error(
                "interaction_deferred_without_continuation",
                extra={"handler_key": key, "response_type": response.type.name},
            )
            raise DeferredWithoutContinuationError(key)
        return response

    def _resolve(self, interaction: Interaction) -> tuple[InteractionHandlerProtocol, str]:
        data = interaction.data
        if interaction.type == InteractionType.APPLICATION_COMMAND:
            if data is None or not (data.id or data.name):
                raise MissingInteractionDataError("missing_command_data")
            key = data.name or data.id or ""
            handler = self._registry.lookup_command(interaction.guild_id, data.id, data.name)
        else:
            if data is None or not data.custom_id:
                raise MissingInteractionDataError("missing_custom_id")
            key = data.custom_id
            handler = self._registry.lookup_component(data.custom_id)

        if handler is None:
            logger.error(
                "interaction_handler_missing",
                extra={
                    "interaction_type": interaction.type.name,
                    "handler_key": key,
                    "guild_id": interaction.guild_id,
                },
            )
            raise NoHandlerFoundError(key)
        return handler, key

    async def _invoke(
        self,
        handler: InteractionHandlerProtocol,
        ctx: InteractionContext,
        key: str,
    ) -> InteractionResponse:
        deadline = asyncio.timeout(self._handler_timeout)
        try:
            result = handler(ctx)
            if inspect.isawaitable(result):
                async with deadline:
                    result = await result
        except TimeoutError as exc:
            # Só o limite do dispatcher vira HandlerTimeoutError
            if not deadline.expired():
                raise self._handler_failed(key, exc) from exc
            logger.error(
                "interaction_handler_timeout",
                extra={"handler_key": key, "timeout_seconds": self._handler_timeout},
            )
            raise HandlerTimeoutError(key) from exc
        except Exception as exc:
            raise self._handler_failed(key, exc) from exc

        if not isinstance(result, InteractionResponse):
            logger.error(
                "interaction_handler_invalid_result",
                extra={"handler_key": key, "result_type": type(result).__name__},
            )
            raise HandlerFailedError(key)
        return result

    @staticmethod
    def _handler_failed(key: str, exc: Exception) -> HandlerFailedError:
        logger.error(
            "interaction_handler_failed",
            extra={"handler_key": key, "error_type": type(exc).__name__},
            exc_info=exc,
        )
        return HandlerFailedError(key)
