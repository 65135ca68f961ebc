"""Decodificação do envelope de interação Discord.

Converte o corpo JSON já autenticado em `Interaction`, aplicando os campos
obrigatórios de cada tipo. Mensagens de erro descrevem apenas a forma do
payload (nunca o conteúdo).
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from app.domain import Interaction, InteractionType
from utils.errors import InteractionDecodeError

_ADDRESSING_FIELDS = ("id", "application_id", "token")


def decode_interaction(raw_body: bytes) -> Interaction:
    """Decodifica o corpo bruto em Interaction.

    Raises:
        InteractionDecodeError: JSON malformado, corpo que não é objeto,
            `type` ausente/desconhecido ou campo obrigatório ausente.
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InteractionDecodeError(f"invalid JSON at position {getattr(exc, 'pos', 0)}") from exc

    if not isinstance(payload, dict):
        raise InteractionDecodeError("payload is not an object")

    kind = _parse_kind(payload.get("type"))
    if kind != InteractionType.PING:
        _require_fields(kind, payload)

    try:
        return Interaction.model_validate(payload)
    except ValidationError as exc:
        raise InteractionDecodeError(_describe_validation_error(exc)) from exc


def _parse_kind(raw_type: Any) -> InteractionType:
    if raw_type is None:
        raise InteractionDecodeError("missing field `type`")
    if isinstance(raw_type, bool) or not isinstance(raw_type, int):
        raise InteractionDecodeError("field `type` must be an integer")
    try:
        return InteractionType(raw_type)
    except ValueError as exc:
        raise InteractionDecodeError(f"unknown interaction type {raw_type}") from exc


def _require_fields(kind: InteractionType, payload: dict[str, Any]) -> None:
    for field_name in _ADDRESSING_FIELDS:
        if payload.get(field_name) in (None, ""):
            raise InteractionDecodeError(f"missing field `{field_name}`")

    data = payload.get("data")
    if not isinstance(data, dict):
        raise InteractionDecodeError("missing field `data`")

    if kind == InteractionType.APPLICATION_COMMAND:
        required: tuple[str, ...] = ("id", "name")
    else:
        required = ("custom_id",)

    for field_name in required:
        if data.get(field_name) in (None, ""):
            raise InteractionDecodeError(f"missing field `data.{field_name}`")


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"invalid field `{location}`: {first.get('type', 'invalid')}"
