"""Contexto de execução entregue aos handlers de interação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.coordinators.discord.continuations import DeferredContinuation, DeliveryMode
from app.domain import (
    InteractionCallbackData,
    InteractionResponse,
    InteractionResponseBuilder,
    InteractionResponseType,
)

if TYPE_CHECKING:
    from app.coordinators.discord.continuations import (
        ContinuationScheduler,
        ContinuationWork,
    )
    from app.domain import FollowupMessage, Interaction, WebhookMessage
    from app.protocols.discord_rest import DiscordRestProtocol
    from app.services.handler_registry import HandlerRegistry


class InteractionContext:
    """Interação corrente mais os colaboradores que um handler pode usar.

    Os helpers de follow-up usam o `application_id` e o `token` da própria
    interação.
    """

    def __init__(
        self,
        interaction: Interaction,
        rest: DiscordRestProtocol,
        registry: HandlerRegistry,
        scheduler: ContinuationScheduler,
    ) -> None:
        self._interaction = interaction
        self._rest = rest
        self._registry = registry
        self._scheduler = scheduler
        self._continuation_scheduled = False

    @property
    def interaction(self) -> Interaction:
        return self._interaction

    @property
    def rest(self) -> DiscordRestProtocol:
        return self._rest

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    @property
    def continuation_scheduled(self) -> bool:
        return self._continuation_scheduled

    # ──────────────────────────────────────────────────────────────────────
    # Respostas síncronas
    # ──────────────────────────────────────────────────────────────────────

    def respond(self) -> InteractionResponseBuilder:
        """Builder de resposta; componentes atualizam a mensagem de origem."""
        if self._interaction.is_component:
            return InteractionResponseBuilder(InteractionResponseType.UPDATE_MESSAGE)
        return InteractionResponseBuilder()

    def respond_with_modal(
        self,
        custom_id: str,
        title: str,
        components: list[dict[str, Any]],
    ) -> InteractionResponse:
        return InteractionResponse(
            type=InteractionResponseType.MODAL,
            data=InteractionCallbackData(custom_id=custom_id, title=title, components=components),
        )

    def respond_now(self, response: InteractionResponse) -> InteractionResponse:
        """Resposta final imediata; tipos deferred exigem `respond_and_continue`."""
        if response.type.is_deferred:
            raise ValueError("deferred responses must be produced by respond_and_continue")
        return response

    def respond_and_continue(
        self,
        work: ContinuationWork,
        delivery: DeliveryMode = DeliveryMode.EDIT_ORIGINAL,
    ) -> InteractionResponse:
        """Agenda `work` em background e devolve o ACK deferred.

        O resultado de `work(ctx)` é entregue com edit original (padrão) ou
        follow-up; NONE e PONG não geram entrega.

        Raises:
            ValueError: Interação sem application_id/token.
            RuntimeError: Continuação já agendada para esta interação.
        """
        if self._continuation_scheduled:
            raise RuntimeError("continuation already scheduled for this interaction")
        application_id, token = self._addressing()

        self._scheduler.schedule(
            DeferredContinuation(
                application_id=application_id,
                token=token,
                work=work,
                context=self,
                delivery=delivery,
            )
        )
        self._continuation_scheduled = True

        if self._interaction.is_component:
            return InteractionResponse(type=InteractionResponseType.DEFERRED_UPDATE_MESSAGE)
        return InteractionResponse(type=InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE)

    # ──────────────────────────────────────────────────────────────────────
    # Mensagem original e follow-ups
    # ──────────────────────────────────────────────────────────────────────

    async def edit_original(self, message: WebhookMessage) -> None:
        application_id, token = self._addressing()
        await self._rest.edit_original(application_id, token, message)

    async def delete_original(self) -> None:
        application_id, token = self._addressing()
        await self._rest.delete_original(application_id, token)

    async def create_followup(self, message: WebhookMessage) -> FollowupMessage:
        application_id, token = self._addressing()
        return await self._rest.create_followup(application_id, token, message)

    async def edit_followup(self, message_id: str, message: WebhookMessage) -> FollowupMessage:
        application_id, token = self._addressing()
        return await self._rest.edit_followup(application_id, token, message_id, message)

    async def delete_followup(self, message_id: str) -> None:
        application_id, token = self._addressing()
        await self._rest.delete_followup(application_id, token, message_id)

    def _addressing(self) -> tuple[str, str]:
        application_id = self._interaction.application_id
        token = self._interaction.token
        if not application_id or not token:
            raise ValueError("interaction has no application_id/token")
        return application_id, token
