"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.server import (
    ServerSettings,
    get_server_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    # Server
    "ServerSettings",
    "get_base_settings",
    "get_server_settings",
]
