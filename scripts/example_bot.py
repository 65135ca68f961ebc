#!/usr/bin/env python3
"""Bot de exemplo: registra handlers e sobe o endpoint de interações.

Uso:
    DISCORD_PUBLIC_KEY=... DISCORD_APPLICATION_ID=... DISCORD_BOT_TOKEN=... \
        python scripts/example_bot.py

Comandos globais registrados:
- /summon: resposta imediata com botão
- /slow: resposta deferred, editada depois do trabalho
- /later: resposta deferred entregue como follow-up
- /feedback: abre um modal
- /generate: cria o comando de guild /generated (que se remove ao ser usado)
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from app.app import main as serve
from app.coordinators.discord import DeliveryMode, InteractionContext
from app.domain import ApplicationCommand, InteractionResponse, ManipulationScope
from app.services.handler_registry import HandlerRegistry
from utils.errors import RemoteApiError

logger = logging.getLogger(__name__)

BUTTON_ROW = {
    "type": 1,
    "components": [{"type": 2, "style": 1, "label": "Clique", "custom_id": "summon_button"}],
}
FEEDBACK_ROW = {
    "type": 1,
    "components": [
        {"type": 4, "custom_id": "feedback_text", "style": 2, "label": "O que achou?"}
    ],
}


def summon(ctx: InteractionContext) -> InteractionResponse:
    return ctx.respond().content("I HAVE BEEN SUMMONED!!!").add_component_row(BUTTON_ROW).finish()


def summon_button(ctx: InteractionContext) -> InteractionResponse:
    return ctx.respond().content("Botão clicado!").finish()


async def _slow_work(ctx: InteractionContext) -> InteractionResponse:
    await asyncio.sleep(5)
    return ctx.respond().content("I was summoned?").finish()


def slow(ctx: InteractionContext) -> InteractionResponse:
    return ctx.respond_and_continue(_slow_work)


async def _followup_work(ctx: InteractionContext) -> InteractionResponse:
    await asyncio.sleep(1)
    return ctx.respond().content("Follow-up enviado depois do ACK").finish()


def later(ctx: InteractionContext) -> InteractionResponse:
    return ctx.respond_and_continue(_followup_work, delivery=DeliveryMode.FOLLOWUP)


def feedback(ctx: InteractionContext) -> InteractionResponse:
    return ctx.respond_with_modal("feedback_modal", "Feedback", [FEEDBACK_ROW])


def feedback_submitted(ctx: InteractionContext) -> InteractionResponse:
    return ctx.respond().content("Obrigado pelo feedback!").finish()


async def delete_self(ctx: InteractionContext) -> InteractionResponse:
    interaction = ctx.interaction
    if interaction.guild_id is None or interaction.data is None or interaction.data.id is None:
        return ctx.respond().content("Algo deu errado!").finish()
    try:
        await ctx.registry.deregister_guild(interaction.guild_id, interaction.data.id)
    except RemoteApiError as exc:
        logger.warning("example_deregister_failed", extra={"status_code": exc.code})
        return ctx.respond().content("Algo deu errado!").finish()
    return ctx.respond().content("`/generated` removido!").finish()


async def generate(ctx: InteractionContext) -> InteractionResponse:
    guild_id = ctx.interaction.guild_id
    if guild_id is None:
        return ctx.respond().content("Use este comando numa guild!").finish()

    command = ApplicationCommand(name="generated", description="Comando de guild gerado")
    try:
        await ctx.registry.register_guild(guild_id, command, delete_self, ManipulationScope.ALL)
    except RemoteApiError as exc:
        logger.warning("example_register_failed", extra={"status_code": exc.code})
        return ctx.respond().content("Algo deu errado!").finish()
    return ctx.respond().content("`/generated` registrado!").finish()


def register_handlers(registry: HandlerRegistry) -> None:
    registry.register_global("summon", summon)
    registry.register_global("slow", slow)
    registry.register_global("later", later)
    registry.register_global("feedback", feedback)
    registry.register_global("generate", generate)
    registry.register_component("summon_button", summon_button)
    registry.register_component("feedback_modal", feedback_submitted)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--list",
        action="store_true",
        help="Lista os handlers registrados e sai, sem subir o servidor.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.list:
        registry = HandlerRegistry()
        register_handlers(registry)
        print(registry.counts())
        return
    serve(configure_handlers=register_handlers)


if __name__ == "__main__":
    main()
