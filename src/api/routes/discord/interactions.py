"""Endpoint de interações do Discord.

Endpoint:
- POST {DISCORD_INTERACTIONS_PATH}: recebimento de interações assinadas

Fluxo:
1. Content-Type e headers de assinatura (400)
2. Assinatura Ed25519 (401)
3. Decodificação do envelope (400)
4. Despacho para o handler registrado (501/500)
5. Mapeamento do tipo de resposta para status HTTP

Segurança:
- Validação de assinatura obrigatória antes de qualquer decodificação
- Motivo real de falhas de autenticação apenas nos logs
- Tokens de interação nunca são logados
"""

from __future__ import annotations

import logging
import time

from fastapi import Request, Response

from api.connectors.discord.webhook.receive import parse_interaction_request
from api.routes.discord.responses import error_response, to_http_response
from app.bootstrap import get_interaction_dispatcher, get_interaction_public_key
from app.observability import (
    record_interaction,
    record_latency,
    reset_correlation_id,
    reset_interaction_id,
    set_correlation_id,
    set_interaction_id,
)
from utils.errors import DispatchError, InteractionError

logger = logging.getLogger(__name__)


async def receive_interaction(request: Request) -> Response:
    """Recebe, autentica e despacha uma interação.

    Returns:
        Resposta HTTP derivada do tipo de resposta do handler, ou
        {"message": ...} com o status da falha.
    """
    correlation_token = set_correlation_id(request.headers.get("x-correlation-id"))
    interaction_id_token = set_interaction_id(None)
    started_at = time.perf_counter()
    interaction_type = "unknown"

    try:
        raw_body = await request.body()
        try:
            interaction = parse_interaction_request(
                raw_body=raw_body,
                headers=request.headers,
                public_key=get_interaction_public_key(),
            )
            interaction_type = interaction.type.name
            reset_interaction_id(interaction_id_token)
            interaction_id_token = set_interaction_id(interaction.id)

            logger.info(
                "interaction_received",
                extra={
                    "interaction_type": interaction_type,
                    "guild_id": interaction.guild_id,
                    "payload_size": len(raw_body),
                },
            )
            response = await get_interaction_dispatcher().dispatch(interaction)
            http_response = to_http_response(response)

        except DispatchError as exc:
            logger.error(
                "interaction_dispatch_failed",
                extra={
                    "interaction_type": interaction_type,
                    "error_type": type(exc).__name__,
                    "status_code": exc.status_code,
                    "reason": exc.detail,
                },
            )
            http_response = error_response(exc)

        except InteractionError as exc:
            logger.warning(
                "interaction_rejected",
                extra={
                    "error_type": type(exc).__name__,
                    "status_code": exc.status_code,
                    "reason": exc.detail,
                    "payload_size": len(raw_body),
                },
            )
            http_response = error_response(exc)

        except Exception as exc:
            logger.exception(
                "interaction_processing_failed",
                extra={
                    "interaction_type": interaction_type,
                    "error_type": type(exc).__name__,
                    "payload_size": len(raw_body),
                },
            )
            http_response = error_response(DispatchError(f"unexpected_error: {type(exc).__name__}"))

        record_interaction(interaction_type, http_response.status_code)
        record_latency("interactions", "receive", (time.perf_counter() - started_at) * 1000)
        return http_response

    finally:
        reset_interaction_id(interaction_id_token)
        reset_correlation_id(correlation_token)
