"""Parse e validação inicial do webhook de interações (sem PII).

Ordem fixa: Content-Type → headers de assinatura → assinatura → decode.
Falhas de transporte nunca chegam a tocar a criptografia.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord.signature import verify_interaction_signature
from api.normalizers.discord.decoder import decode_interaction
from utils.errors import BadContentTypeError, MissingSignatureHeadersError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

    from app.domain import Interaction

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"
EXPECTED_MEDIA_TYPE = "application/json"


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        value = headers.get(name.title())
    return value


def validate_transport_headers(headers: Mapping[str, str]) -> tuple[str, str]:
    """Valida Content-Type e presença dos headers de assinatura.

    Returns:
        (signature_hex, timestamp)

    Raises:
        BadContentTypeError: Content-Type ausente ou diferente de application/json
        MissingSignatureHeadersError: Header de assinatura ou timestamp ausente
    """
    content_type = _header(headers, "content-type")
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type != EXPECTED_MEDIA_TYPE:
        raise BadContentTypeError(f"content_type: {media_type or 'missing'}")

    signature = _header(headers, SIGNATURE_HEADER)
    timestamp = _header(headers, TIMESTAMP_HEADER)
    if signature is None or timestamp is None:
        raise MissingSignatureHeadersError("missing_signature_headers")

    return signature, timestamp


def parse_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    public_key: Ed25519PublicKey,
) -> Interaction:
    """Valida transporte, assinatura e decodifica a interação.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        public_key: Chave pública Ed25519 da aplicação

    Raises:
        TransportValidationError: Falha de Content-Type ou headers (400)
        AuthError: Assinatura inválida (401)
        DecodeError: Corpo autenticado com formato inválido (400)
    """
    signature, timestamp = validate_transport_headers(headers)
    verify_interaction_signature(public_key, signature, timestamp, raw_body)
    return decode_interaction(raw_body)
