"""Verificação Ed25519 das interações Discord.

O Discord assina `timestamp + corpo bruto` (bytes, sem separador) com a
chave privada da aplicação; validamos com a chave pública configurada.
"""

from __future__ import annotations

import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from utils.errors import InvalidSignatureError, KeyConversionError

SIGNATURE_LENGTH = 64
PUBLIC_KEY_LENGTH = 32


def load_public_key(public_key_hex: str) -> Ed25519PublicKey:
    """Converte a chave pública hex (32 bytes) em chave Ed25519.

    Raises:
        KeyConversionError: name="Public Key" se o hex ou o tamanho forem inválidos.
    """
    try:
        raw = bytes.fromhex(public_key_hex.strip())
    except ValueError as exc:
        raise KeyConversionError("Public Key") from exc
    if len(raw) != PUBLIC_KEY_LENGTH:
        raise KeyConversionError("Public Key")
    try:
        return Ed25519PublicKey.from_public_bytes(raw)
    except ValueError as exc:
        raise KeyConversionError("Public Key") from exc


def verify_interaction_signature(
    public_key: Ed25519PublicKey,
    signature_hex: str,
    timestamp: str,
    raw_body: bytes,
) -> None:
    """Valida a assinatura de uma interação.

    Args:
        public_key: Chave pública da aplicação
        signature_hex: Header X-Signature-Ed25519
        timestamp: Header X-Signature-Timestamp
        raw_body: Corpo bruto da requisição

    Raises:
        KeyConversionError: "Signature" (hex inválido) ou
            "Signature Length" (diferente de 64 bytes)
        InvalidSignatureError: Se a verificação criptográfica falhar
    """
    try:
        signature = binascii.unhexlify(signature_hex)
    except (binascii.Error, ValueError) as exc:
        raise KeyConversionError("Signature") from exc

    if len(signature) != SIGNATURE_LENGTH:
        raise KeyConversionError("Signature Length")

    try:
        public_key.verify(signature, timestamp.encode() + raw_body)
    except InvalidSignature as exc:
        raise InvalidSignatureError() from exc
