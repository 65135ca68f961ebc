"""Modelos de domínio das interações Discord."""

from app.domain.application_command import (
    ApplicationCommand,
    ApplicationCommandType,
    ManipulationScope,
)
from app.domain.interaction import (
    DiscordUser,
    GuildMember,
    Interaction,
    InteractionData,
    InteractionType,
    Snowflake,
)
from app.domain.interaction_response import (
    MAX_EMBEDS,
    FollowupMessage,
    InteractionCallbackData,
    InteractionResponse,
    InteractionResponseBuilder,
    InteractionResponseType,
    WebhookMessage,
)

__all__ = [
    "MAX_EMBEDS",
    "ApplicationCommand",
    "ApplicationCommandType",
    "DiscordUser",
    "FollowupMessage",
    "GuildMember",
    "Interaction",
    "InteractionCallbackData",
    "InteractionData",
    "InteractionResponse",
    "InteractionResponseBuilder",
    "InteractionResponseType",
    "InteractionType",
    "ManipulationScope",
    "Snowflake",
    "WebhookMessage",
]
