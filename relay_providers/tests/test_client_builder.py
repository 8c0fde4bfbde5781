"""Client construction, baked-in authentication and the scoped request factory."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from relay_providers.anthropic import AnthropicClient
from relay_providers.base.errors import ConfigurationError, ErrorCode, RequestError
from relay_providers.base.log_support import REDACTED
from relay_providers.gemini import GeminiClient
from relay_providers.openai import OpenAIClient
from relay_providers.together import TogetherClient

KEY = "sk-ant-abc123"


def test_anthropic_static_headers(make_client):
    client, _ = make_client(AnthropicClient, api_key=KEY)
    request = client.post("v1/messages", json={})
    assert request.headers["x-api-key"] == KEY  # nosec B101
    assert request.headers["anthropic-version"] == "2023-06-01"  # nosec B101
    assert "anthropic-beta" not in request.headers  # nosec B101
    assert str(request.url) == "https://api.anthropic.com/v1/messages"  # nosec B101


def test_feature_flags_join_in_caller_order(make_client):
    client, _ = make_client(
        AnthropicClient,
        configure=lambda b: b.anthropic_beta("f2").anthropic_betas(["f1", "f3"]),
    )
    request = client.post("/v1/messages", json={})
    assert request.headers["anthropic-beta"] == "f2,f1,f3"  # nosec B101


def test_empty_feature_list_omits_header(make_client):
    client, _ = make_client(AnthropicClient, configure=lambda b: b.anthropic_betas([]))
    assert "anthropic-beta" not in client.post("/v1/messages").headers  # nosec B101


def test_version_override(make_client):
    client, _ = make_client(AnthropicClient, configure=lambda b: b.anthropic_version("2024-01-01"))
    assert client.post("/v1/messages").headers["anthropic-version"] == "2024-01-01"  # nosec B101


def test_bearer_auth(make_client):
    client, _ = make_client(TogetherClient, api_key=KEY)
    request = client.post("/v1/chat/completions", json={})
    assert request.headers["authorization"] == f"Bearer {KEY}"  # nosec B101
    assert str(request.url) == "https://api.together.xyz/v1/chat/completions"  # nosec B101


def test_query_auth_on_every_request(make_client):
    client, _ = make_client(GeminiClient, api_key="AIzaSyRelay")
    request = client.post("/v1beta/models/gemini-1.5-flash:generateContent", json={})
    assert request.url.params["key"] == "AIzaSyRelay"  # nosec B101
    assert "x-api-key" not in request.headers and "authorization" not in request.headers  # nosec B101


def test_post_sse_appends_streaming_indicator_after_key(make_client):
    client, _ = make_client(GeminiClient, api_key="AIzaSyRelay")
    request = client.post_sse("v1beta/models/m:streamGenerateContent", json={})
    assert request.url.query == b"key=AIzaSyRelay&alt=sse"  # nosec B101
    assert request.headers["accept"] == "text/event-stream"  # nosec B101


def test_post_sse_header_auth_adds_no_query(make_client):
    client, _ = make_client(AnthropicClient)
    request = client.post_sse("/v1/messages", json={})
    assert request.url.query == b""  # nosec B101
    assert request.headers["accept"] == "text/event-stream"  # nosec B101


def test_custom_base_url_joins_cleanly(make_client):
    client, _ = make_client(OpenAIClient, configure=lambda b: b.base_url("http://localhost:8080/v1/"))
    assert str(client.post("/embeddings").url) == "http://localhost:8080/v1/embeddings"  # nosec B101


def test_request_log_redacts_query_key(make_client, relay_logs):
    client, _ = make_client(GeminiClient, api_key="AIzaSySecret")
    client.post_sse("/v1beta/models/m:streamGenerateContent", json={}, model="m")
    events = [e for e in relay_logs.events if e.get("event") == "http.request"]
    assert events, "expected an http.request log event"  # nosec B101
    url = events[-1]["url"]
    assert f"key={REDACTED}" in url and "alt=sse" in url  # nosec B101
    assert all("AIzaSySecret" not in str(e) for e in relay_logs.events)  # nosec B101


def test_build_logs_without_credentials(make_client, relay_logs):
    make_client(AnthropicClient, api_key=KEY, configure=lambda b: b.anthropic_beta("f1"))
    built = [e for e in relay_logs.events if e.get("event") == "client.build"]
    assert built and built[-1]["features"] == ["f1"]  # nosec B101
    assert all(KEY not in str(e) for e in relay_logs.events)  # nosec B101


@pytest.mark.parametrize("bad_key", ["abc\r\nx-evil: 1", "ключ", "tab\x00null"])
def test_illegal_header_characters_fail_construction(bad_key):
    with pytest.raises(ConfigurationError) as info:
        AnthropicClient.new(bad_key)
    assert info.value.code is ErrorCode.CONFIGURATION  # nosec B101
    assert bad_key not in info.value.message  # nosec B101


def test_illegal_extra_header_fails_construction():
    with pytest.raises(ConfigurationError):
        OpenAIClient.builder(KEY).header("x-trace", "a\nb").build()
    with pytest.raises(ConfigurationError):
        OpenAIClient.builder(KEY).header("bad name", "v").build()


def test_empty_key_fails_construction():
    with pytest.raises(ConfigurationError):
        GeminiClient.new("")


@pytest.mark.parametrize("url", ["not a url", "ftp://host/x", "/relative/only"])
def test_unusable_base_url_fails_construction(url):
    with pytest.raises(ConfigurationError):
        TogetherClient.builder(KEY).base_url(url).build()


def test_features_rejected_without_feature_header():
    with pytest.raises(ConfigurationError):
        OpenAIClient.builder(KEY).feature("beta").build()


def test_transport_init_failure_is_configuration_error(monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("TLS backend unavailable")

    monkeypatch.setattr(httpx, "AsyncClient", broken)
    with pytest.raises(ConfigurationError) as info:
        AnthropicClient.new(KEY)
    assert "TLS backend unavailable" in info.value.message  # nosec B101
    assert isinstance(info.value.__cause__, OSError)  # nosec B101


def test_from_env_reads_provider_variable(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", KEY)
    client = AnthropicClient.from_env()
    assert client.post("/v1/messages").headers["x-api-key"] == KEY  # nosec B101


def test_from_env_accepts_gemini_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "AIzaSyAlias")
    client = GeminiClient.from_env()
    assert client.post("/x").url.params["key"] == "AIzaSyAlias"  # nosec B101


@pytest.mark.parametrize("value", ["test_key_123", "changeme", "sk-EXAMPLE-key"])
def test_from_env_rejects_placeholder_keys(monkeypatch, value):
    monkeypatch.setenv("OPENAI_API_KEY", value)
    with pytest.raises(ConfigurationError) as info:
        OpenAIClient.from_env()
    assert "OPENAI_API_KEY" in info.value.message and "placeholder" in info.value.message  # nosec B101


def test_from_env_missing_is_configuration_error():
    with pytest.raises(ConfigurationError) as info:
        TogetherClient.from_env()
    assert "TOGETHER_API_KEY" in info.value.message  # nosec B101


@pytest.mark.asyncio
async def test_copy_shares_transport_and_is_immutable(make_client):
    client, _ = make_client(OpenAIClient)
    other = client.copy()
    assert other is not client and other == client  # nosec B101
    assert other.http is client.http  # nosec B101
    with pytest.raises(dataclasses.FrozenInstanceError):
        other.base_url = "https://elsewhere"  # type: ignore[misc]
    await other.aclose()
    assert client.http.is_closed  # nosec B101


@pytest.mark.asyncio
async def test_send_wraps_transport_failures(make_client, relay_logs):
    client, _ = make_client(OpenAIClient, httpx.ConnectError("connection refused"))
    with pytest.raises(RequestError) as info:
        await client.send(client.post("/chat/completions", json={}), model="gpt-4o")
    assert info.value.code is ErrorCode.TRANSIENT  # nosec B101
    assert info.value.retryable is True  # nosec B101
    assert info.value.status_code is None  # nosec B101
    assert any(e.get("event") == "http.error" for e in relay_logs.events)  # nosec B101


@pytest.mark.asyncio
async def test_async_context_manager_closes_client(make_client):
    client, _ = make_client(TogetherClient)
    async with client as c:
        assert c is client  # nosec B101
    assert client.http.is_closed  # nosec B101
