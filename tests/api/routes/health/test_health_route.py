"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from tests.fakes.fake_discord import PUBLIC_KEY

from api.routes.health import router as health_router
from app.coordinators.discord import ContinuationScheduler
from app.services.handler_registry import HandlerRegistry
from utils.errors import KeyConversionError


def _patch_dependencies(
    monkeypatch: pytest.MonkeyPatch,
    *,
    public_key_ok: bool = True,
    application_id: str = "800000000000000001",
) -> HandlerRegistry:
    def _public_key():
        if not public_key_ok:
            raise KeyConversionError("Public Key")
        return PUBLIC_KEY

    registry = HandlerRegistry()
    monkeypatch.setattr(health_router, "get_interaction_public_key", _public_key)
    monkeypatch.setattr(health_router, "get_handler_registry", lambda: registry)
    monkeypatch.setattr(health_router, "get_continuation_scheduler", ContinuationScheduler)
    monkeypatch.setattr(
        health_router,
        "get_discord_settings",
        lambda: SimpleNamespace(application_id=application_id),
    )
    return registry


@pytest.mark.asyncio
async def test_health_reports_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        health_router,
        "get_base_settings",
        lambda: SimpleNamespace(service_name="discord-interactions"),
    )

    response = await health_router.health_check()

    assert response.status == "healthy"
    assert response.service == "discord-interactions"


@pytest.mark.asyncio
async def test_readiness_ready_with_key_and_application(monkeypatch: pytest.MonkeyPatch) -> None:
    registry = _patch_dependencies(monkeypatch)
    registry.register_global("summon", lambda ctx: None)

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["public_key"]["status"] == "ok"
    assert payload["handlers"] == {"global": 1, "guild": 0, "component": 0}
    assert payload["pending_continuations"] == 0


@pytest.mark.asyncio
async def test_readiness_not_ready_with_invalid_key(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_dependencies(monkeypatch, public_key_ok=False)

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["public_key"] == {"status": "failed", "error": "invalid_public_key"}


@pytest.mark.asyncio
async def test_readiness_not_ready_without_application_id(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_dependencies(monkeypatch, application_id="")

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["application_id"]["error"] == "not_configured"
