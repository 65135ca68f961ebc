"""Agregador de rotas — registra health checks e o endpoint de interações.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.router import create_discord_router
from api.routes.health.router import router as health_router
from config.settings import get_discord_settings


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        create_discord_router(get_discord_settings().interactions_path),
        tags=["discord"],
    )

    return api_router
