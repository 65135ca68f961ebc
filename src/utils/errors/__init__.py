"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthError,
    BadContentTypeError,
    DecodeError,
    DeferredWithoutContinuationError,
    DispatchError,
    HandlerFailedError,
    HandlerTimeoutError,
    InteractionDecodeError,
    InteractionError,
    InvalidSignatureError,
    KeyConversionError,
    MissingInteractionDataError,
    MissingSignatureHeadersError,
    NoHandlerFoundError,
    RemoteApiError,
    TransportValidationError,
)

__all__ = [
    "AuthError",
    "BadContentTypeError",
    "DecodeError",
    "DeferredWithoutContinuationError",
    "DispatchError",
    "HandlerFailedError",
    "HandlerTimeoutError",
    "InteractionDecodeError",
    "InteractionError",
    "InvalidSignatureError",
    "KeyConversionError",
    "MissingInteractionDataError",
    "MissingSignatureHeadersError",
    "NoHandlerFoundError",
    "RemoteApiError",
    "TransportValidationError",
]
