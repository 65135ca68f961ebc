"""Protocolos e contratos do core da aplicação."""

from .discord_rest import DiscordRestProtocol
from .interaction_handler import InteractionHandlerProtocol

__all__ = [
    "DiscordRestProtocol",
    "InteractionHandlerProtocol",
]
