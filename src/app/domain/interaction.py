"""Modelo de domínio de uma interação recebida do Discord.

Campos desconhecidos no payload são ignorados; IDs (snowflakes) são
sempre carregados como string decimal, mesmo quando chegam como inteiro.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _coerce_snowflake(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


Snowflake = Annotated[str, BeforeValidator(_coerce_snowflake)]


class InteractionType(IntEnum):
    """Tipos de interação suportados pelo endpoint."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    MODAL_SUBMIT = 5


class DiscordUser(BaseModel):
    """Usuário Discord (subconjunto usado pelos handlers)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Snowflake
    username: str = ""
    discriminator: str | None = None
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False


class GuildMember(BaseModel):
    """Membro de guild que disparou a interação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    user: DiscordUser | None = None
    nick: str | None = None
    roles: list[Snowflake] = Field(default_factory=list)
    joined_at: str | None = None
    permissions: str | None = None


class InteractionData(BaseModel):
    """Payload `data` da interação.

    Comandos usam `id`/`name`/`options`; componentes e modais usam
    `custom_id` (e `values`/`components` conforme o caso).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Snowflake | None = None
    name: str | None = None
    type: int | None = None
    custom_id: str | None = None
    component_type: int | None = None
    values: list[str] = Field(default_factory=list)
    target_id: Snowflake | None = None
    options: list[dict[str, Any]] = Field(default_factory=list)
    resolved: dict[str, Any] | None = None
    components: list[dict[str, Any]] = Field(default_factory=list)


class Interaction(BaseModel):
    """Interação autenticada e decodificada (imutável)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: InteractionType
    id: Snowflake | None = None
    application_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    data: InteractionData | None = None
    token: str | None = None
    member: GuildMember | None = None
    user: DiscordUser | None = None
    version: int | None = None
    message: dict[str, Any] | None = None
    locale: str | None = None
    guild_locale: str | None = None

    @property
    def invoker(self) -> DiscordUser | None:
        """Usuário que disparou a interação (membro em guild ou usuário em DM)."""
        if self.member is not None and self.member.user is not None:
            return self.member.user
        return self.user

    @property
    def is_component(self) -> bool:
        return self.type == InteractionType.MESSAGE_COMPONENT
