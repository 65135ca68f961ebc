"""Testes do contexto entregue aos handlers."""

from __future__ import annotations

import pytest
from tests.fakes.fake_discord import (
    APPLICATION_ID,
    INTERACTION_TOKEN,
    FakeDiscordRest,
    command_payload,
    component_payload,
    make_interaction,
    ping_payload,
)

from app.coordinators.discord import ContinuationScheduler, DeliveryMode, InteractionContext
from app.domain import InteractionResponse, InteractionResponseType, WebhookMessage
from app.services.handler_registry import HandlerRegistry


def _context(
    payload: dict,
    rest: FakeDiscordRest | None = None,
    scheduler: ContinuationScheduler | None = None,
) -> InteractionContext:
    return InteractionContext(
        make_interaction(payload),
        rest or FakeDiscordRest(),
        HandlerRegistry(),
        scheduler or ContinuationScheduler(),
    )


def _noop_work(ctx):
    return ctx.respond().none()


def test_respond_for_command_is_channel_message() -> None:
    response = _context(command_payload()).respond().content("hi").finish()

    assert response.type == InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE


def test_respond_for_component_is_update_message() -> None:
    response = _context(component_payload()).respond().content("hi").finish()

    assert response.type == InteractionResponseType.UPDATE_MESSAGE


def test_respond_with_modal() -> None:
    response = _context(command_payload()).respond_with_modal("m", "Título", [{"type": 1}])

    assert response.to_payload() == {
        "type": 9,
        "data": {"custom_id": "m", "title": "Título", "components": [{"type": 1}]},
    }


def test_respond_now_rejects_deferred_types() -> None:
    ctx = _context(command_payload())

    with pytest.raises(ValueError):
        ctx.respond_now(InteractionResponse(type=InteractionResponseType.DEFERRED_UPDATE_MESSAGE))

    final = ctx.respond().content("ok").finish()
    assert ctx.respond_now(final) is final


@pytest.mark.asyncio
async def test_respond_and_continue_for_command() -> None:
    scheduler = ContinuationScheduler()
    ctx = _context(command_payload(), scheduler=scheduler)

    response = ctx.respond_and_continue(_noop_work)
    await scheduler.drain(timeout_seconds=1)

    assert response.type == InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE
    assert ctx.continuation_scheduled


@pytest.mark.asyncio
async def test_respond_and_continue_for_component_defers_update() -> None:
    scheduler = ContinuationScheduler()
    ctx = _context(component_payload(), scheduler=scheduler)

    response = ctx.respond_and_continue(_noop_work, delivery=DeliveryMode.FOLLOWUP)
    await scheduler.drain(timeout_seconds=1)

    assert response.type == InteractionResponseType.DEFERRED_UPDATE_MESSAGE


@pytest.mark.asyncio
async def test_second_continuation_is_rejected() -> None:
    scheduler = ContinuationScheduler()
    ctx = _context(command_payload(), scheduler=scheduler)
    ctx.respond_and_continue(_noop_work)

    with pytest.raises(RuntimeError):
        ctx.respond_and_continue(_noop_work)

    await scheduler.drain(timeout_seconds=1)
    assert scheduler.active_count == 0


def test_continuation_requires_token() -> None:
    ctx = _context(ping_payload())

    with pytest.raises(ValueError):
        ctx.respond_and_continue(_noop_work)

    assert not ctx.continuation_scheduled


@pytest.mark.asyncio
async def test_followup_helpers_use_interaction_addressing() -> None:
    rest = FakeDiscordRest()
    ctx = _context(command_payload(), rest)
    message = WebhookMessage(content="x")

    created = await ctx.create_followup(message)
    await ctx.edit_followup(created.id, message)
    await ctx.delete_followup(created.id)
    await ctx.edit_original(message)
    await ctx.delete_original()

    assert [name for name, _ in rest.calls] == [
        "create_followup",
        "edit_followup",
        "delete_followup",
        "edit_original",
        "delete_original",
    ]
    assert all(args[:2] == (APPLICATION_ID, INTERACTION_TOKEN) for _, args in rest.calls)
    assert rest.calls_named("delete_followup") == [(APPLICATION_ID, INTERACTION_TOKEN, created.id)]
