"""Settings específicas de Discord.

Configurações do endpoint de interações e do cliente REST do Discord.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Discord API
DISCORD_API_VERSION: str = "v10"
DISCORD_API_BASE_URL: str = "https://discord.com/api"
DISCORD_INTERACTIONS_PATH: str = "/api/discord/interactions"

_PUBLIC_KEY_PATTERN = re.compile(r"[0-9a-fA-F]{64}")


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública Ed25519 da aplicação (hex, 32 bytes)
        application_id: ID da aplicação Discord
        bot_token: Token do bot (opcional; necessário para gerenciar comandos)
        api_version: Versão da API
        api_base_url: URL base da API
        interactions_path: Caminho do endpoint de interações
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em falhas transitórias
        handler_timeout_seconds: Timeout da fase síncrona do handler (None = sem timeout)
        max_concurrent_continuations: Limite de continuações deferred em execução
    """

    # Credenciais
    public_key: str = ""
    application_id: str = ""
    bot_token: str = ""

    # API
    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL
    interactions_path: str = DISCORD_INTERACTIONS_PATH

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    handler_timeout_seconds: float | None = None

    # Continuações deferred
    max_concurrent_continuations: int = 100

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif not _PUBLIC_KEY_PATTERN.fullmatch(self.public_key):
            errors.append("DISCORD_PUBLIC_KEY deve ter 64 caracteres hexadecimais")

        if not self.application_id:
            errors.append("DISCORD_APPLICATION_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("DISCORD_MAX_RETRIES deve ser >= 0")

        if self.handler_timeout_seconds is not None and self.handler_timeout_seconds <= 0:
            errors.append("DISCORD_HANDLER_TIMEOUT_SECONDS deve ser > 0")

        if self.max_concurrent_continuations < 1:
            errors.append("DISCORD_MAX_CONCURRENT_CONTINUATIONS deve ser >= 1")

        if not self.interactions_path.startswith("/"):
            errors.append("DISCORD_INTERACTIONS_PATH deve começar com '/'")

        return errors


def _parse_optional_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    return float(raw)


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings a partir de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        application_id=os.getenv("DISCORD_APPLICATION_ID", "").strip(),
        bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        interactions_path=os.getenv("DISCORD_INTERACTIONS_PATH", DISCORD_INTERACTIONS_PATH),
        request_timeout_seconds=float(os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("DISCORD_MAX_RETRIES", "3")),
        handler_timeout_seconds=_parse_optional_float(
            os.getenv("DISCORD_HANDLER_TIMEOUT_SECONDS")
        ),
        max_concurrent_continuations=int(
            os.getenv("DISCORD_MAX_CONCURRENT_CONTINUATIONS", "100")
        ),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
