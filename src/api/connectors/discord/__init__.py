"""Conector Discord — assinatura, webhook de interações e API REST."""

from api.connectors.discord.http_client import DiscordHttpClient, create_discord_http_client
from api.connectors.discord.signature import load_public_key, verify_interaction_signature

__all__ = [
    "DiscordHttpClient",
    "create_discord_http_client",
    "load_public_key",
    "verify_interaction_signature",
]
