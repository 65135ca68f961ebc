"""Cliente HTTP base para conectores da camada API.

Um único `httpx.AsyncClient` por instância (pool de conexões reaproveitado
entre requests e continuações), criado sob demanda e fechado no shutdown.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# POST não é retentado: a resposta pode se perder depois do recurso criado
RETRYABLE_METHODS = frozenset({"GET", "HEAD", "PUT", "PATCH", "DELETE"})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP com retry para falhas transitórias.

    Apenas erros de transporte e respostas 5xx são retentados, e só para
    métodos em RETRYABLE_METHODS. Respostas 4xx (429 incluído) voltam direto
    para o chamador.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                headers=self._config.default_headers,
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        client = self._get_client()
        max_retries = self._config.max_retries if method.upper() in RETRYABLE_METHODS else 0
        for attempt in range(max_retries + 1):
            try:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    headers=headers,
                )
                if response.status_code >= 500:
                    raise HttpError(
                        "http_retryable_status",
                        status_code=response.status_code,
                        is_retryable=True,
                    )
                return response
            except HttpError as exc:
                if not exc.is_retryable or attempt >= max_retries:
                    raise
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
            except httpx.TransportError as exc:
                if attempt >= max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def aclose(self) -> None:
        """Fecha o pool de conexões (idempotente)."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
