"""Cliente HTTP especializado para a API REST do Discord.

Estende HttpClient genérico com comportamentos específicos do Discord:
- Header `Authorization: Bot <token>` quando há token de bot
- Rotas de comandos de guild, permissões e webhooks de interação
- Conversão de qualquer falha em `RemoteApiError` (code 0 = sem resposta)
- Logging estruturado sem tokens nem conteúdo de mensagens
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.discord.api_errors import parse_discord_error
from api.connectors.discord.api_logging import log_api_error, log_success
from api.connectors.discord.http_base import HttpClient, HttpClientConfig, HttpError
from app.domain import ApplicationCommand, FollowupMessage
from app.observability import record_latency
from utils.errors import RemoteApiError

if TYPE_CHECKING:
    import httpx

    from app.domain import WebhookMessage
    from config.settings import DiscordSettings

logger: logging.Logger = logging.getLogger(__name__)

USER_AGENT = "DiscordBot (discord-interactions, 1.0.0)"
_AUTH_SCHEMES = ("Bot ", "Bearer ")


class DiscordHttpClient(HttpClient):
    """Cliente REST do Discord compartilhado por handlers e continuações."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        bot_token: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self._authorization = _authorization_header(bot_token)

    # ──────────────────────────────────────────────────────────────────────
    # Comandos de guild
    # ──────────────────────────────────────────────────────────────────────

    async def register_guild_command(
        self,
        application_id: str,
        guild_id: str,
        command: ApplicationCommand,
    ) -> ApplicationCommand:
        """Registra (ou sobrescreve) um comando na guild.

        Raises:
            RemoteApiError: Falha remota ou resposta sem `id` (code 0).
        """
        response = await self._call(
            "register_guild_command",
            "POST",
            f"/applications/{application_id}/guilds/{guild_id}/commands",
            json=command.to_payload(),
        )
        registered = ApplicationCommand.model_validate(self._json(response))
        if not registered.id:
            raise RemoteApiError(0, "Command registration response did not have an ID.")
        return registered

    async def delete_guild_command(
        self,
        application_id: str,
        guild_id: str,
        command_id: str,
    ) -> None:
        await self._call(
            "delete_guild_command",
            "DELETE",
            f"/applications/{application_id}/guilds/{guild_id}/commands/{command_id}",
            expected_status=204,
        )

    async def override_guild_permissions(
        self,
        application_id: str,
        guild_id: str,
        overrides: list[dict[str, Any]],
    ) -> Any:
        """Substitui as permissões de todos os comandos da guild."""
        response = await self._call(
            "override_guild_permissions",
            "PUT",
            f"/applications/{application_id}/guilds/{guild_id}/commands/permissions",
            json=overrides,
        )
        return self._json(response)

    async def edit_guild_command_permissions(
        self,
        application_id: str,
        guild_id: str,
        command_id: str,
        permissions: list[dict[str, Any]],
    ) -> Any:
        response = await self._call(
            "edit_guild_command_permissions",
            "PUT",
            f"/applications/{application_id}/guilds/{guild_id}/commands/{command_id}/permissions",
            json={"permissions": permissions},
        )
        return self._json(response)

    # ──────────────────────────────────────────────────────────────────────
    # Webhooks de interação
    # ──────────────────────────────────────────────────────────────────────

    async def edit_original(
        self,
        application_id: str,
        token: str,
        message: WebhookMessage,
    ) -> None:
        await self._call(
            "edit_original",
            "PATCH",
            f"/webhooks/{application_id}/{token}/messages/@original",
            json=message.to_payload(),
        )

    async def delete_original(self, application_id: str, token: str) -> None:
        await self._call(
            "delete_original",
            "DELETE",
            f"/webhooks/{application_id}/{token}/messages/@original",
            expected_status=204,
        )

    async def create_followup(
        self,
        application_id: str,
        token: str,
        message: WebhookMessage,
    ) -> FollowupMessage:
        response = await self._call(
            "create_followup",
            "POST",
            f"/webhooks/{application_id}/{token}",
            json=message.to_payload(),
            params={"wait": "true"},
        )
        return FollowupMessage.model_validate(self._json(response))

    async def edit_followup(
        self,
        application_id: str,
        token: str,
        message_id: str,
        message: WebhookMessage,
    ) -> FollowupMessage:
        response = await self._call(
            "edit_followup",
            "PATCH",
            f"/webhooks/{application_id}/{token}/messages/{message_id}",
            json=message.to_payload(),
        )
        return FollowupMessage.model_validate(self._json(response))

    async def delete_followup(self, application_id: str, token: str, message_id: str) -> None:
        await self._call(
            "delete_followup",
            "DELETE",
            f"/webhooks/{application_id}/{token}/messages/{message_id}",
            expected_status=204,
        )

    # ──────────────────────────────────────────────────────────────────────
    # Dados auxiliares
    # ──────────────────────────────────────────────────────────────────────

    async def get_guild(self, guild_id: str) -> dict[str, Any]:
        response = await self._call(
            "get_guild",
            "GET",
            f"/guilds/{guild_id}",
            params={"with_counts": "true"},
        )
        return self._json(response)

    async def get_guild_member(self, guild_id: str, user_id: str) -> dict[str, Any]:
        response = await self._call(
            "get_guild_member",
            "GET",
            f"/guilds/{guild_id}/members/{user_id}",
        )
        return self._json(response)

    # ──────────────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────────────

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        expected_status: int | None = None,
    ) -> httpx.Response:
        """Executa a chamada e converte falhas em RemoteApiError."""
        started_at = time.perf_counter()
        try:
            response = await self.request(
                method,
                path,
                json=json,
                params=params,
                headers=self._headers(),
            )
        except HttpError as exc:
            code = exc.status_code or 0
            log_api_error(operation, method, code, str(exc))
            raise RemoteApiError(code, str(exc)) from exc
        finally:
            record_latency("discord_rest", operation, (time.perf_counter() - started_at) * 1000)

        unexpected = expected_status is not None and response.status_code != expected_status
        if response.is_error or unexpected:
            api_error = parse_discord_error(response)
            log_api_error(
                operation,
                method,
                api_error.status_code,
                api_error.message,
                api_error.discord_code,
            )
            raise api_error.to_remote_error()

        log_success(operation, method, response.status_code)
        return response

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if self._authorization:
            headers["Authorization"] = self._authorization
        return headers

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteApiError(response.status_code, "Invalid JSON response") from exc


def _authorization_header(bot_token: str) -> str:
    token = bot_token.strip()
    if not token:
        return ""
    if token.startswith(_AUTH_SCHEMES):
        return token
    return f"Bot {token}"


def create_discord_http_client(
    settings: DiscordSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DiscordHttpClient:
    """Factory para criar cliente Discord com config padrão.

    Args:
        settings: DiscordSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes usam MockTransport).

    Returns:
        Cliente HTTP configurado para a API do Discord.
    """
    # Import local para evitar dependência circular
    from config.settings import get_discord_settings

    discord = settings or get_discord_settings()
    config = HttpClientConfig(
        base_url=discord.api_endpoint,
        timeout_seconds=discord.request_timeout_seconds,
        max_retries=discord.max_retries,
    )
    return DiscordHttpClient(config=config, bot_token=discord.bot_token, transport=transport)
