"""Recebimento do webhook de interações Discord."""

from api.connectors.discord.webhook.receive import (
    parse_interaction_request,
    validate_transport_headers,
)

__all__ = ["parse_interaction_request", "validate_transport_headers"]
