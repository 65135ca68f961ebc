"""Router do Discord — agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.interactions import receive_interaction
from config.settings import DISCORD_INTERACTIONS_PATH


def create_discord_router(interactions_path: str = DISCORD_INTERACTIONS_PATH) -> APIRouter:
    """Cria router com o endpoint de interações no caminho configurado."""
    router = APIRouter()
    router.add_api_route(
        interactions_path,
        receive_interaction,
        methods=["POST"],
        response_model=None,
        name="discord_interactions",
    )
    return router
