"""Testes do cliente REST do Discord com transporte httpx simulado."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.discord.http_base import HttpClientConfig
from api.connectors.discord.http_client import USER_AGENT, DiscordHttpClient
from app.domain import ApplicationCommand, WebhookMessage
from utils.errors import RemoteApiError

BASE_URL = "https://discord.test/api/v10"


def _client(handler, *, bot_token: str = "secret-token", max_retries: int = 0) -> DiscordHttpClient:
    config = HttpClientConfig(base_url=BASE_URL, max_retries=max_retries, backoff_base_seconds=0)
    return DiscordHttpClient(config, bot_token=bot_token, transport=httpx.MockTransport(handler))


class _Recorder:
    def __init__(self, *responses: httpx.Response) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]


@pytest.mark.asyncio
async def test_register_guild_command_posts_payload_and_parses_id() -> None:
    recorder = _Recorder(httpx.Response(201, json={"id": "300", "name": "gen", "description": "d"}))
    client = _client(recorder)

    registered = await client.register_guild_command(
        "800", "100", ApplicationCommand(id="ignored", name="gen", description="d")
    )
    await client.aclose()

    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/v10/applications/800/guilds/100/commands"
    assert json.loads(request.content) == {
        "type": 1,
        "name": "gen",
        "description": "d",
        "options": [],
    }
    assert request.headers["authorization"] == "Bot secret-token"
    assert request.headers["user-agent"] == USER_AGENT
    assert registered.id == "300"


@pytest.mark.asyncio
async def test_register_without_id_is_remote_error_code_zero() -> None:
    client = _client(_Recorder(httpx.Response(200, json={"name": "gen"})))

    with pytest.raises(RemoteApiError) as exc_info:
        await client.register_guild_command("800", "100", ApplicationCommand(name="gen"))

    assert exc_info.value.code == 0
    assert exc_info.value.message == "Command registration response did not have an ID."


@pytest.mark.asyncio
async def test_delete_guild_command_expects_no_content() -> None:
    recorder = _Recorder(httpx.Response(204))
    client = _client(recorder)

    await client.delete_guild_command("800", "100", "300")

    assert recorder.requests[0].method == "DELETE"
    assert recorder.requests[0].url.path == "/api/v10/applications/800/guilds/100/commands/300"


@pytest.mark.asyncio
async def test_delete_with_unexpected_success_status_is_error() -> None:
    client = _client(_Recorder(httpx.Response(200, json={})))

    with pytest.raises(RemoteApiError) as exc_info:
        await client.delete_original("800", "tok")

    assert exc_info.value.code == 200


@pytest.mark.asyncio
async def test_edit_guild_command_permissions_wraps_body() -> None:
    recorder = _Recorder(httpx.Response(200, json={"id": "300", "permissions": []}))
    client = _client(recorder)
    permissions = [{"id": "role", "type": 1, "permission": True}]

    await client.edit_guild_command_permissions("800", "100", "300", permissions)

    request = recorder.requests[0]
    assert request.method == "PUT"
    assert request.url.path.endswith("/guilds/100/commands/300/permissions")
    assert json.loads(request.content) == {"permissions": permissions}


@pytest.mark.asyncio
async def test_override_guild_permissions_sends_list() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))
    client = _client(recorder)

    await client.override_guild_permissions("800", "100", [{"id": "300", "permissions": []}])

    assert recorder.requests[0].url.path.endswith("/guilds/100/commands/permissions")
    assert json.loads(recorder.requests[0].content) == [{"id": "300", "permissions": []}]


@pytest.mark.asyncio
async def test_edit_original_patches_original_message() -> None:
    recorder = _Recorder(httpx.Response(200, json={"id": "1"}))
    client = _client(recorder)

    await client.edit_original("800", "tok", WebhookMessage(content="done"))

    request = recorder.requests[0]
    assert request.method == "PATCH"
    assert request.url.path == "/api/v10/webhooks/800/tok/messages/@original"
    assert json.loads(request.content) == {"content": "done"}


@pytest.mark.asyncio
async def test_create_followup_waits_and_parses_message() -> None:
    recorder = _Recorder(httpx.Response(200, json={"id": "200", "content": "later", "type": 0}))
    client = _client(recorder)

    created = await client.create_followup("800", "tok", WebhookMessage(content="later"))

    request = recorder.requests[0]
    assert request.url.path == "/api/v10/webhooks/800/tok"
    assert request.url.params["wait"] == "true"
    assert created.id == "200"
    assert created.content == "later"


@pytest.mark.asyncio
async def test_edit_and_delete_followup_address_message() -> None:
    recorder = _Recorder(
        httpx.Response(200, json={"id": "200", "content": "edited"}),
        httpx.Response(204),
    )
    client = _client(recorder)

    edited = await client.edit_followup("800", "tok", "200", WebhookMessage(content="edited"))
    await client.delete_followup("800", "tok", "200")

    assert edited.content == "edited"
    assert [r.method for r in recorder.requests] == ["PATCH", "DELETE"]
    assert all(r.url.path == "/api/v10/webhooks/800/tok/messages/200" for r in recorder.requests)


@pytest.mark.asyncio
async def test_get_guild_requests_counts() -> None:
    recorder = _Recorder(httpx.Response(200, json={"id": "100", "name": "Guild"}))
    client = _client(recorder)

    guild = await client.get_guild("100")

    assert guild["name"] == "Guild"
    assert recorder.requests[0].url.params["with_counts"] == "true"


@pytest.mark.asyncio
async def test_get_guild_member_path() -> None:
    recorder = _Recorder(httpx.Response(200, json={"user": {"id": "5"}}))
    client = _client(recorder)

    await client.get_guild_member("100", "5")

    assert recorder.requests[0].url.path == "/api/v10/guilds/100/members/5"


@pytest.mark.asyncio
async def test_discord_error_body_is_parsed() -> None:
    client = _client(_Recorder(httpx.Response(404, json={"code": 10015, "message": "Unknown Webhook"})))

    with pytest.raises(RemoteApiError) as exc_info:
        await client.edit_original("800", "tok", WebhookMessage(content="x"))

    assert exc_info.value.code == 404
    assert exc_info.value.message == "Unknown Webhook"
    assert exc_info.value.discord_code == 10015
    assert not exc_info.value.is_retryable


@pytest.mark.asyncio
async def test_error_without_json_uses_reason_phrase() -> None:
    client = _client(_Recorder(httpx.Response(403, content=b"forbidden")))

    with pytest.raises(RemoteApiError) as exc_info:
        await client.get_guild("100")

    assert exc_info.value.code == 403
    assert exc_info.value.message == "Forbidden"
    assert exc_info.value.discord_code is None


@pytest.mark.asyncio
async def test_server_error_is_retried() -> None:
    recorder = _Recorder(httpx.Response(503), httpx.Response(204))
    client = _client(recorder, max_retries=1)

    await client.delete_original("800", "tok")

    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_server_error_after_retries_keeps_status() -> None:
    recorder = _Recorder(httpx.Response(502))
    client = _client(recorder, max_retries=1)

    with pytest.raises(RemoteApiError) as exc_info:
        await client.delete_original("800", "tok")

    assert len(recorder.requests) == 2
    assert exc_info.value.code == 502
    assert exc_info.value.is_retryable


@pytest.mark.asyncio
async def test_create_followup_is_not_replayed_after_server_error() -> None:
    recorder = _Recorder(
        httpx.Response(502),
        httpx.Response(200, json={"id": "200", "content": "x", "type": 0}),
    )
    client = _client(recorder, max_retries=3)

    with pytest.raises(RemoteApiError) as exc_info:
        await client.create_followup("800", "tok", WebhookMessage(content="x"))

    assert [request.method for request in recorder.requests] == ["POST"]
    assert exc_info.value.code == 502


@pytest.mark.asyncio
async def test_register_guild_command_is_not_replayed_after_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request.method)
        raise httpx.ReadTimeout("read timed out", request=request)

    sent: list[str] = []
    client = _client(handler, max_retries=3)

    with pytest.raises(RemoteApiError) as exc_info:
        await client.register_guild_command(
            "800", "100", ApplicationCommand(id="ignored", name="gen", description="d")
        )

    assert sent == ["POST"]
    assert exc_info.value.code == 0


@pytest.mark.asyncio
async def test_edit_original_is_retried_after_server_error() -> None:
    recorder = _Recorder(httpx.Response(502), httpx.Response(200, json={"id": "1"}))
    client = _client(recorder, max_retries=3)

    await client.edit_original("800", "tok", WebhookMessage(content="x"))

    assert [request.method for request in recorder.requests] == ["PATCH", "PATCH"]


@pytest.mark.asyncio
async def test_rate_limit_is_not_retried() -> None:
    recorder = _Recorder(httpx.Response(429, json={"message": "You are being rate limited.", "retry_after": 1}))
    client = _client(recorder, max_retries=3)

    with pytest.raises(RemoteApiError) as exc_info:
        await client.get_guild("100")

    assert len(recorder.requests) == 1
    assert exc_info.value.code == 429


@pytest.mark.asyncio
async def test_transport_failure_is_code_zero() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler, max_retries=1)

    with pytest.raises(RemoteApiError) as exc_info:
        await client.get_guild("100")

    assert exc_info.value.code == 0
    assert exc_info.value.is_retryable


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("bot_token", "expected"),
    [("Bearer abc", "Bearer abc"), ("Bot abc", "Bot abc"), ("abc", "Bot abc")],
)
async def test_authorization_scheme(bot_token: str, expected: str) -> None:
    recorder = _Recorder(httpx.Response(200, json={"id": "100"}))
    client = _client(recorder, bot_token=bot_token)

    await client.get_guild("100")

    assert recorder.requests[0].headers["authorization"] == expected


@pytest.mark.asyncio
async def test_without_bot_token_no_authorization_header() -> None:
    recorder = _Recorder(httpx.Response(200, json={"id": "100"}))
    client = _client(recorder, bot_token="")

    await client.get_guild("100")

    assert "authorization" not in recorder.requests[0].headers


@pytest.mark.asyncio
async def test_aclose_is_idempotent() -> None:
    client = _client(_Recorder(httpx.Response(200, json={"id": "100"})))
    await client.get_guild("100")

    await client.aclose()
    await client.aclose()
