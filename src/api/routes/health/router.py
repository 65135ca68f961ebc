"""Endpoints de health check e readiness."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import (
    get_continuation_scheduler,
    get_handler_registry,
    get_interaction_public_key,
)
from config.settings import get_base_settings, get_discord_settings
from utils.errors import KeyConversionError

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: chave pública carregada e aplicação configurada."""
    public_key_check = _check_public_key()
    application_check = _check_application_id()
    ready = public_key_check.status == "ok" and application_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "public_key": public_key_check.as_dict(),
            "application_id": application_check.as_dict(),
        },
        "handlers": get_handler_registry().counts(),
        "pending_continuations": get_continuation_scheduler().active_count,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_public_key() -> DependencyCheck:
    try:
        get_interaction_public_key()
    except KeyConversionError as exc:
        logger.warning("readiness_public_key_invalid", extra={"reason": exc.detail})
        return DependencyCheck(status="failed", error="invalid_public_key")
    return DependencyCheck(status="ok")


def _check_application_id() -> DependencyCheck:
    if not get_discord_settings().application_id:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
