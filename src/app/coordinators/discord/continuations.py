"""Continuações de respostas deferred.

O handler devolve o ACK deferred imediatamente; o trabalho real roda numa
task em background e o resultado é entregue via "edit original" ou
"follow-up". Falhas são apenas logadas: o request original já terminou.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from app.domain import InteractionResponse, WebhookMessage
from app.observability import record_continuation, record_latency
from utils.errors import RemoteApiError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.coordinators.discord.context import InteractionContext

    ContinuationWork = Callable[
        [InteractionContext],
        Awaitable[InteractionResponse] | InteractionResponse,
    ]

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT = 100


class DeliveryMode(StrEnum):
    EDIT_ORIGINAL = "edit_original"
    FOLLOWUP = "followup"


@dataclass(frozen=True, slots=True)
class DeferredContinuation:
    """Trabalho pendente de uma interação já reconhecida."""

    application_id: str
    token: str
    work: ContinuationWork
    context: InteractionContext
    delivery: DeliveryMode = DeliveryMode.EDIT_ORIGINAL

    async def run(self) -> None:
        """Executa o trabalho e entrega o resultado (nunca propaga falhas remotas)."""
        started_at = time.perf_counter()
        try:
            result = self.work(self.context)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.exception(
                "deferred_work_failed",
                extra={"delivery": self.delivery.value, "error_type": type(exc).__name__},
            )
            record_continuation("work_failed", self.delivery.value)
            return

        if not isinstance(result, InteractionResponse):
            logger.error(
                "deferred_work_invalid_result",
                extra={"result_type": type(result).__name__},
            )
            record_continuation("work_failed", self.delivery.value)
            return

        if not result.type.carries_data:
            logger.info("deferred_delivery_skipped", extra={"response_type": result.type.name})
            record_continuation("skipped", self.delivery.value)
            return

        try:
            await self._deliver(WebhookMessage.from_response(result))
        except RemoteApiError as exc:
            logger.error(
                "deferred_delivery_failed",
                extra={
                    "delivery": self.delivery.value,
                    "status_code": exc.code,
                    "discord_code": exc.discord_code,
                },
            )
            record_continuation("delivery_failed", self.delivery.value)
            return

        record_continuation("delivered", self.delivery.value)
        record_latency("continuation", self.delivery.value, (time.perf_counter() - started_at) * 1000)

    async def _deliver(self, message: WebhookMessage) -> None:
        rest = self.context.rest
        if self.delivery == DeliveryMode.FOLLOWUP:
            await rest.create_followup(self.application_id, self.token, message)
        else:
            await rest.edit_original(self.application_id, self.token, message)


class ContinuationScheduler:
    """Agenda continuações como tasks asyncio com limite de concorrência.

    Mantém referência forte até o fim de cada task; nenhum handle é
    devolvido ao chamador.
    """

    def __init__(self, max_concurrent: int = DEFAULT_MAX_CONCURRENT) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._active: set[asyncio.Task[Any]] = set()

    @property
    def active_count(self) -> int:
        return len(self._active)

    def schedule(self, continuation: DeferredContinuation) -> None:
        task = asyncio.create_task(self._run_with_limit(continuation))
        self._active.add(task)
        task.add_done_callback(self._on_task_done)
        logger.info(
            "continuation_scheduled",
            extra={
                "delivery": continuation.delivery.value,
                "active_tasks": len(self._active),
            },
        )

    async def _run_with_limit(self, continuation: DeferredContinuation) -> None:
        async with self._semaphore:
            await continuation.run()

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._active.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "continuation_task_failed",
                    extra={
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active),
                    },
                )

    async def drain(self, timeout_seconds: float = 30.0) -> None:
        """Aguarda continuações pendentes no shutdown; cancela as que restarem."""
        if not self._active:
            return

        pending_now = list(self._active)
        logger.info(
            "continuation_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "continuation_shutdown_cancelled",
            extra={"cancelled_tasks": len(pending)},
        )
