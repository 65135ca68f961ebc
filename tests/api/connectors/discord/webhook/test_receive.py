"""Testes para parse e validação inicial do webhook de interações."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from tests.fakes.fake_discord import PUBLIC_KEY, encode, ping_payload, signed_headers

from api.connectors.discord.webhook.receive import (
    parse_interaction_request,
    validate_transport_headers,
)
from app.domain import InteractionType
from utils.errors import (
    BadContentTypeError,
    InteractionDecodeError,
    InvalidSignatureError,
    MissingSignatureHeadersError,
)


def test_parse_valid_ping() -> None:
    body = encode(ping_payload())

    interaction = parse_interaction_request(body, signed_headers(body), PUBLIC_KEY)

    assert interaction.type == InteractionType.PING


def test_content_type_with_charset_is_accepted() -> None:
    body = encode(ping_payload())
    headers = {**signed_headers(body), "content-type": "Application/JSON; charset=utf-8"}

    interaction = parse_interaction_request(body, headers, PUBLIC_KEY)

    assert interaction.type == InteractionType.PING


@pytest.mark.parametrize("content_type", [None, "text/plain", "application/jsonp"])
def test_bad_content_type_is_rejected_before_signature(content_type: str | None) -> None:
    public_key = MagicMock()
    headers = {"x-signature-ed25519": "zz", "x-signature-timestamp": "1"}
    if content_type is not None:
        headers["content-type"] = content_type

    with pytest.raises(BadContentTypeError) as exc_info:
        parse_interaction_request(b"{}", headers, public_key)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Bad Content-Type"
    public_key.verify.assert_not_called()


@pytest.mark.parametrize("missing", ["x-signature-ed25519", "x-signature-timestamp"])
def test_missing_signature_header_is_rejected_before_signature(missing: str) -> None:
    public_key = MagicMock()
    body = encode(ping_payload())
    headers = signed_headers(body)
    del headers[missing]

    with pytest.raises(MissingSignatureHeadersError) as exc_info:
        parse_interaction_request(body, headers, public_key)

    assert exc_info.value.message == "Bad signature data"
    public_key.verify.assert_not_called()


def test_validate_transport_headers_returns_signature_data() -> None:
    headers = {
        "content-type": "application/json",
        "x-signature-ed25519": "abcd",
        "x-signature-timestamp": "123",
    }

    assert validate_transport_headers(headers) == ("abcd", "123")


def test_invalid_signature_is_rejected() -> None:
    body = encode(ping_payload())
    headers = signed_headers(encode({"type": 2}))

    with pytest.raises(InvalidSignatureError):
        parse_interaction_request(body, headers, PUBLIC_KEY)


def test_signed_but_malformed_body_is_decode_error() -> None:
    body = b"{not json"

    with pytest.raises(InteractionDecodeError) as exc_info:
        parse_interaction_request(body, signed_headers(body), PUBLIC_KEY)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message.startswith("Bad body: ")
