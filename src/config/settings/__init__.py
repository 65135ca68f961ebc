"""Agregador de settings do serviço de interações.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    ServerSettings,
    get_base_settings,
    get_server_settings,
)

# Channel-specific settings
from config.settings.discord import (
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DISCORD_INTERACTIONS_PATH,
    DiscordSettings,
    get_discord_settings,
)

__all__ = [
    # Constants
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    "DISCORD_INTERACTIONS_PATH",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    "ServerSettings",
    "get_base_settings",
    "get_discord_settings",
    "get_server_settings",
]
