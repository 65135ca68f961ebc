"""Formatters de logging estruturado.

Define formatters para logs JSON com campos obrigatórios:
- correlation_id
- interaction_id
- service
- timestamp (asctime)
- level
- logger (name)
- message

Tokens de interação e conteúdo de mensagens nunca entram nos logs.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem estável no output)
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "interaction_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "INFO",
            "logger": "api.routes.discord.interactions",
            "message": "interaction_received",
            "correlation_id": "abc-123",
            "interaction_id": "1183749021",
            "service": "discord-interactions"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
