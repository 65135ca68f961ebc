"""Definição de comandos de aplicação (slash commands)."""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.interaction import Snowflake


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class ManipulationScope(StrEnum):
    """Onde uma operação de registro de comando tem efeito.

    - LOCAL: apenas no mapa em memória
    - DISCORD: apenas na API remota
    - ALL: API remota primeiro, depois mapa local (só se a chamada remota der certo)
    """

    LOCAL = "local"
    DISCORD = "discord"
    ALL = "all"


class ApplicationCommand(BaseModel):
    """Comando de aplicação, como enviado e devolvido pela API do Discord."""

    model_config = ConfigDict(extra="ignore")

    id: Snowflake | None = None
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    application_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    name: str
    description: str = ""
    options: list[dict[str, Any]] = Field(default_factory=list)
    default_permission: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        """Corpo de registro (campos atribuídos pelo Discord ficam de fora)."""
        return self.model_dump(
            mode="json",
            exclude_none=True,
            exclude={"id", "application_id", "guild_id"},
        )
