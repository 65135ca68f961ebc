"""Erros e helpers de parsing para a API REST do Discord."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import RemoteApiError

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class DiscordApiError:
    """Erro retornado pela API do Discord.

    Corpo típico: {"code": 50035, "message": "Invalid Form Body", "errors": {...}}
    """

    status_code: int
    message: str
    discord_code: int | None = None

    def to_remote_error(self) -> RemoteApiError:
        return RemoteApiError(self.status_code, self.message, self.discord_code)


def parse_discord_error(response: httpx.Response) -> DiscordApiError:
    """Extrai status e mensagem de uma resposta de erro.

    Sem corpo JSON legível, usa o reason phrase do HTTP.
    """
    message = response.reason_phrase or "Unknown error"
    discord_code: int | None = None
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        raw_message = body.get("message")
        if isinstance(raw_message, str) and raw_message:
            message = raw_message
        raw_code = body.get("code")
        if isinstance(raw_code, int) and not isinstance(raw_code, bool):
            discord_code = raw_code

    return DiscordApiError(
        status_code=response.status_code,
        message=message,
        discord_code=discord_code,
    )
