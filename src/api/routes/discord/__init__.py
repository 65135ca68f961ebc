"""Rotas HTTP do Discord."""

from api.routes.discord.router import create_discord_router

__all__ = ["create_discord_router"]
