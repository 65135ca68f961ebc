"""Settings do servidor HTTP (porta e material TLS)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ServerSettings:
    """Configurações de bind do uvicorn.

    Attributes:
        host: Interface de escuta
        port: Porta de escuta
        tls_cert_file: Caminho do certificado PEM (opcional)
        tls_key_file: Caminho da chave privada PEM (opcional)
    """

    host: str = "0.0.0.0"
    port: int = 8080
    tls_cert_file: str = ""
    tls_key_file: str = ""

    @property
    def tls_enabled(self) -> bool:
        return bool(self.tls_cert_file and self.tls_key_file)

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo: {self.port}")

        if bool(self.tls_cert_file) != bool(self.tls_key_file):
            errors.append("TLS_CERT_FILE e TLS_KEY_FILE devem ser informados juntos")

        return errors


def _load_from_env() -> ServerSettings:
    return ServerSettings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        tls_cert_file=os.getenv("TLS_CERT_FILE", ""),
        tls_key_file=os.getenv("TLS_KEY_FILE", ""),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_from_env()
