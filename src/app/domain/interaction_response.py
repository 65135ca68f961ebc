"""Respostas a interações e mensagens de webhook.

Regras:
- NONE, PONG e os tipos DEFERRED nunca carregam `data`
- MODAL exige `custom_id`, `title` e `components`
- No máximo 10 embeds por mensagem
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.domain.interaction import Snowflake

logger = logging.getLogger(__name__)

MAX_EMBEDS = 10


class InteractionResponseType(IntEnum):
    """Tipos de resposta; o tipo determina o status HTTP de saída."""

    NONE = 0
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    MODAL = 9

    @property
    def is_deferred(self) -> bool:
        return self in _DEFERRED_TYPES

    @property
    def carries_data(self) -> bool:
        return self not in _DATALESS_TYPES


_DEFERRED_TYPES = frozenset(
    {
        InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE,
        InteractionResponseType.DEFERRED_UPDATE_MESSAGE,
    }
)
_DATALESS_TYPES = _DEFERRED_TYPES | {InteractionResponseType.NONE, InteractionResponseType.PONG}


class InteractionCallbackData(BaseModel):
    """Conteúdo de uma resposta (mensagem ou modal).

    Embeds e componentes são objetos JSON opacos.
    """

    model_config = ConfigDict(extra="ignore")

    tts: bool | None = None
    content: str | None = None
    embeds: list[dict[str, Any]] | None = Field(default=None, max_length=MAX_EMBEDS)
    allowed_mentions: dict[str, Any] | None = None
    flags: int | None = None
    components: list[dict[str, Any]] | None = None
    custom_id: str | None = None
    title: str | None = None


class InteractionResponse(BaseModel):
    """Resposta síncrona a uma interação."""

    model_config = ConfigDict(frozen=True)

    type: InteractionResponseType
    data: InteractionCallbackData | None = None

    @model_validator(mode="after")
    def _check_data_for_type(self) -> Self:
        if self.data is not None and not self.type.carries_data:
            raise ValueError(f"response type {self.type.name} cannot carry data")
        if self.type == InteractionResponseType.MODAL:
            data = self.data
            if data is None or not data.custom_id or not data.title or not data.components:
                raise ValueError("MODAL response requires custom_id, title and components")
        return self

    def to_payload(self) -> dict[str, Any]:
        """Serializa no formato esperado pelo Discord (sem campos nulos)."""
        return self.model_dump(mode="json", exclude_none=True)


class InteractionResponseBuilder:
    """Builder fluente de InteractionResponse.

    Exemplo:
        ctx.respond().content("pong!").tts(True).finish()
    """

    def __init__(
        self,
        response_type: InteractionResponseType = InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
    ) -> None:
        self._type = response_type
        self._data: InteractionCallbackData | None = None

    def _ensure_data(self) -> InteractionCallbackData:
        if self._data is None:
            self._data = InteractionCallbackData()
        return self._data

    def respond_type(self, response_type: InteractionResponseType) -> InteractionResponseBuilder:
        self._type = response_type
        return self

    def tts(self, enable: bool) -> InteractionResponseBuilder:
        self._ensure_data().tts = enable
        return self

    def content(self, text: object) -> InteractionResponseBuilder:
        self._ensure_data().content = str(text)
        return self

    def message(self, text: object) -> InteractionResponseBuilder:
        """Alias de `content()`."""
        return self.content(text)

    def flags(self, value: int) -> InteractionResponseBuilder:
        self._ensure_data().flags = value
        return self

    def allowed_mentions(self, mentions: dict[str, Any]) -> InteractionResponseBuilder:
        self._ensure_data().allowed_mentions = mentions
        return self

    def add_embed(self, embed: dict[str, Any]) -> InteractionResponseBuilder:
        """Adiciona embed; além do limite de 10 o embed é ignorado."""
        data = self._ensure_data()
        embeds = data.embeds or []
        if len(embeds) >= MAX_EMBEDS:
            logger.error("embed_limit_reached", extra={"max_embeds": MAX_EMBEDS})
            return self
        data.embeds = [*embeds, embed]
        return self

    def add_component_row(self, row: dict[str, Any]) -> InteractionResponseBuilder:
        data = self._ensure_data()
        data.components = [*(data.components or []), row]
        return self

    def data(self, data: InteractionCallbackData) -> InteractionResponse:
        self._data = data.model_copy()
        return self.finish()

    def pong(self) -> InteractionResponse:
        self._type = InteractionResponseType.PONG
        self._data = None
        return self.finish()

    def none(self) -> InteractionResponse:
        self._type = InteractionResponseType.NONE
        self._data = None
        return self.finish()

    def finish(self) -> InteractionResponse:
        return InteractionResponse(type=self._type, data=self._data)


class WebhookMessage(BaseModel):
    """Mensagem enviada via webhook de interação (edição ou follow-up)."""

    model_config = ConfigDict(extra="ignore")

    content: str | None = None
    embeds: list[dict[str, Any]] | None = Field(default=None, max_length=MAX_EMBEDS)
    components: list[dict[str, Any]] | None = None
    allowed_mentions: dict[str, Any] | None = None
    flags: int | None = None

    @classmethod
    def from_response(cls, response: InteractionResponse) -> WebhookMessage:
        """Converte o resultado de uma continuação em mensagem de webhook."""
        data = response.data
        if data is None:
            return cls()
        return cls(
            content=data.content,
            embeds=data.embeds,
            components=data.components,
            allowed_mentions=data.allowed_mentions,
            flags=data.flags,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class FollowupMessage(BaseModel):
    """Mensagem devolvida pelo Discord ao criar um follow-up (somente leitura)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Snowflake
    type: int = 0
    channel_id: Snowflake | None = None
    content: str = ""
    embeds: list[dict[str, Any]] = Field(default_factory=list)
    flags: int = 0
    application_id: Snowflake | None = None
    webhook_id: Snowflake | None = None
    timestamp: str | None = None
    edited_timestamp: str | None = None
    message_reference: dict[str, Any] | None = None
