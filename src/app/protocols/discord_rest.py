"""Protocolo do cliente REST do Discord usado pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain import ApplicationCommand, FollowupMessage, WebhookMessage


class DiscordRestProtocol(Protocol):
    """Contrato mínimo para chamadas à API do Discord.

    Toda falha é sinalizada com `RemoteApiError`.
    """

    async def register_guild_command(
        self,
        application_id: str,
        guild_id: str,
        command: ApplicationCommand,
    ) -> ApplicationCommand: ...

    async def delete_guild_command(
        self,
        application_id: str,
        guild_id: str,
        command_id: str,
    ) -> None: ...

    async def override_guild_permissions(
        self,
        application_id: str,
        guild_id: str,
        overrides: list[dict[str, Any]],
    ) -> Any: ...

    async def edit_guild_command_permissions(
        self,
        application_id: str,
        guild_id: str,
        command_id: str,
        permissions: list[dict[str, Any]],
    ) -> Any: ...

    async def edit_original(
        self,
        application_id: str,
        token: str,
        message: WebhookMessage,
    ) -> None: ...

    async def delete_original(self, application_id: str, token: str) -> None: ...

    async def create_followup(
        self,
        application_id: str,
        token: str,
        message: WebhookMessage,
    ) -> FollowupMessage: ...

    async def edit_followup(
        self,
        application_id: str,
        token: str,
        message_id: str,
        message: WebhookMessage,
    ) -> FollowupMessage: ...

    async def delete_followup(self, application_id: str, token: str, message_id: str) -> None: ...

    async def get_guild(self, guild_id: str) -> dict[str, Any]: ...

    async def get_guild_member(self, guild_id: str, user_id: str) -> dict[str, Any]: ...
