"""Factories dos componentes de interação Discord."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord.http_client import DiscordHttpClient, create_discord_http_client
from app.coordinators.discord import ContinuationScheduler, InteractionDispatcher
from app.services.handler_registry import HandlerRegistry

if TYPE_CHECKING:
    from app.protocols.discord_rest import DiscordRestProtocol
    from config.settings import DiscordSettings


def create_rest_client(settings: DiscordSettings) -> DiscordHttpClient:
    """Cria o cliente REST compartilhado (um pool para todo o processo)."""
    return create_discord_http_client(settings)


def create_handler_registry(
    settings: DiscordSettings,
    rest: DiscordRestProtocol,
) -> HandlerRegistry:
    return HandlerRegistry(application_id=settings.application_id, rest=rest)


def create_continuation_scheduler(settings: DiscordSettings) -> ContinuationScheduler:
    return ContinuationScheduler(max_concurrent=settings.max_concurrent_continuations)


def create_interaction_dispatcher(
    settings: DiscordSettings,
    registry: HandlerRegistry,
    rest: DiscordRestProtocol,
    scheduler: ContinuationScheduler,
) -> InteractionDispatcher:
    return InteractionDispatcher(
        registry=registry,
        rest=rest,
        scheduler=scheduler,
        handler_timeout_seconds=settings.handler_timeout_seconds,
    )
