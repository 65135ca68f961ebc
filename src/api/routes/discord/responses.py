"""Mapeamento de respostas de interação para respostas HTTP.

| Tipo                                  | Status | Corpo                  |
|---------------------------------------|--------|------------------------|
| NONE                                  | 204    | vazio                  |
| PONG                                  | 200    | {"type": 1}            |
| CHANNEL_MESSAGE / UPDATE / MODAL      | 200    | resposta completa      |
| DEFERRED_CHANNEL_MESSAGE / DEFERRED_UPDATE | 202 | {"type": N}         |

Toda resposta de erro usa o corpo {"message": string}.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Response, status
from fastapi.responses import JSONResponse

from app.domain import InteractionResponseType

if TYPE_CHECKING:
    from app.domain import InteractionResponse
    from utils.errors import InteractionError


def status_for(response_type: InteractionResponseType) -> int:
    """Status HTTP determinado exclusivamente pelo tipo de resposta."""
    if response_type == InteractionResponseType.NONE:
        return status.HTTP_204_NO_CONTENT
    if response_type.is_deferred:
        return status.HTTP_202_ACCEPTED
    return status.HTTP_200_OK


def to_http_response(response: InteractionResponse) -> Response:
    status_code = status_for(response.type)
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status_code)
    if status_code == status.HTTP_202_ACCEPTED:
        return JSONResponse(content={"type": int(response.type)}, status_code=status_code)
    return JSONResponse(content=response.to_payload(), status_code=status_code)


def error_response(exc: InteractionError) -> JSONResponse:
    return JSONResponse(content={"message": exc.message}, status_code=exc.status_code)
