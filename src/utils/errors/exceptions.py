"""Taxonomia de erros do endpoint de interações Discord.

Cada erro carrega o status HTTP e a mensagem pública usada no corpo
`{"message": ...}`. Detalhes internos ficam apenas nos logs.
"""

from __future__ import annotations


class InteractionError(Exception):
    """Base para falhas tratadas na borda do endpoint de interações."""

    status_code: int = 500
    public_message: str = "Internal error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.public_message)
        self.detail = detail or self.public_message

    @property
    def message(self) -> str:
        """Mensagem segura para o corpo da resposta."""
        return self.public_message


# ──────────────────────────────────────────────────────────────────────────────
# Transporte (400)
# ──────────────────────────────────────────────────────────────────────────────


class TransportValidationError(InteractionError):
    """Request rejeitado antes da autenticação (culpa do cliente)."""

    status_code = 400


class BadContentTypeError(TransportValidationError):
    """Content-Type ausente ou diferente de application/json."""

    public_message = "Bad Content-Type"


class MissingSignatureHeadersError(TransportValidationError):
    """X-Signature-Ed25519 ou X-Signature-Timestamp ausente."""

    public_message = "Bad signature data"


# ──────────────────────────────────────────────────────────────────────────────
# Autenticação (401)
# ──────────────────────────────────────────────────────────────────────────────


class AuthError(InteractionError):
    """Falha de verificação de assinatura.

    A mensagem pública é a mesma para todos os subtipos: o motivo real
    só aparece em log interno.
    """

    status_code = 401
    public_message = "Invalid request signature"


class KeyConversionError(AuthError):
    """Assinatura ou chave não converte para o formato esperado."""

    def __init__(self, name: str) -> None:
        super().__init__(f"key_conversion_failed: {name}")
        self.name = name


class InvalidSignatureError(AuthError):
    """Verificação Ed25519 falhou."""

    def __init__(self) -> None:
        super().__init__("invalid_signature")


# ──────────────────────────────────────────────────────────────────────────────
# Decodificação (400)
# ──────────────────────────────────────────────────────────────────────────────


class DecodeError(InteractionError):
    """Corpo autenticado, mas com formato inválido."""

    status_code = 400


class InteractionDecodeError(DecodeError):
    """JSON malformado, tipo desconhecido ou campo obrigatório ausente.

    A mensagem descreve apenas a forma do payload, então pode ser devolvida.
    """

    @property
    def message(self) -> str:
        return f"Bad body: {self.detail}"


# ──────────────────────────────────────────────────────────────────────────────
# Despacho (5xx)
# ──────────────────────────────────────────────────────────────────────────────


class DispatchError(InteractionError):
    """Falha do lado do servidor ao rotear ou executar um handler."""

    status_code = 500


class NoHandlerFoundError(DispatchError):
    """Comando/componente sem handler registrado (deploy fora de sincronia)."""

    status_code = 501
    public_message = "No associated handler found"

    def __init__(self, key: str) -> None:
        super().__init__(f"no_handler_for: {key}")
        self.key = key


class MissingInteractionDataError(DispatchError):
    """Interação sem os campos de `data` exigidos pelo tipo."""

    public_message = "Failed to unwrap"


class HandlerFailedError(DispatchError):
    """Handler levantou exceção ou devolveu algo que não é uma resposta."""

    public_message = "Handler failed"


class HandlerTimeoutError(DispatchError):
    """Fase síncrona do handler excedeu o timeout configurado."""

    public_message = "Handler timed out"


class DeferredWithoutContinuationError(DispatchError):
    """Resposta deferred devolvida sem continuação agendada."""

    public_message = "Handler failed"


# ──────────────────────────────────────────────────────────────────────────────
# API externa
# ──────────────────────────────────────────────────────────────────────────────


class RemoteApiError(Exception):
    """Erro devolvido pela API REST do Discord.

    Attributes:
        code: Status HTTP da resposta (0 quando a requisição nem completou)
        message: Mensagem de erro do Discord ou descrição da falha
        discord_code: Código de erro JSON do Discord, quando presente
    """

    def __init__(self, code: int, message: str, discord_code: int | None = None) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.discord_code = discord_code

    @property
    def is_retryable(self) -> bool:
        return self.code == 0 or self.code >= 500
