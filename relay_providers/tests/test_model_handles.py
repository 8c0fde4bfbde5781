"""Shared handle behaviour: request execution, batching and dimensionality."""

from __future__ import annotations

import json
from dataclasses import dataclass

import httpx
import pytest

from relay_providers.base.errors import DecodeError, ErrorCode, RequestError
from relay_providers.base.models import CompletionRequest
from relay_providers.openai import OpenAIClient, OpenAIEmbeddingModel

CHAT_OK = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "model": "gpt-4o-mini-2024-07-18",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "Hi!"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
}


@pytest.mark.asyncio
async def test_completion_stamps_transport_facts(make_client, relay_logs):
    client, rec = make_client(OpenAIClient, httpx.Response(200, json=CHAT_OK, headers={"x-request-id": "req_42"}))
    result = await client.completion_model("gpt-4o-mini").completion(CompletionRequest.from_prompt("hello"))
    assert result.text == "Hi!"  # nosec B101
    assert result.meta.http_status == 200 and result.meta.request_id == "req_42"  # nosec B101
    assert result.meta.latency_ms is not None and result.meta.latency_ms >= 0  # nosec B101
    names = [e.get("event") for e in relay_logs.events]
    assert "completion.start" in names and "completion.end" in names  # nosec B101
    end = next(e for e in relay_logs.events if e.get("event") == "completion.end")
    assert end["request_id"] == "req_42" and end["status"] == 200  # nosec B101
    assert rec.last.method == "POST"  # nosec B101


@pytest.mark.asyncio
async def test_completion_error_envelope_raises_request_error(make_client, relay_logs):
    body = {"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}}
    client, _ = make_client(OpenAIClient, httpx.Response(401, json=body))
    with pytest.raises(RequestError) as info:
        await client.completion_model("gpt-4o-mini").completion(CompletionRequest.from_prompt("hello"))
    assert info.value.code is ErrorCode.AUTH and info.value.message == "Incorrect API key provided"  # nosec B101
    errors = [e for e in relay_logs.events if e.get("event") == "completion.error"]
    assert errors and errors[-1]["status"] == 401  # nosec B101


@pytest.mark.asyncio
async def test_completion_unknown_shape_raises_decode_error(make_client):
    client, _ = make_client(OpenAIClient, httpx.Response(200, json={"surprise": True}))
    with pytest.raises(DecodeError):
        await client.completion_model("gpt-4o-mini").completion(CompletionRequest.from_prompt("hello"))


@dataclass(frozen=True)
class TinyBatchEmbeddingModel(OpenAIEmbeddingModel):
    MAX_DOCUMENTS = 2


def _embeddings(request: httpx.Request) -> httpx.Response:
    inputs = json.loads(request.content)["input"]
    data = [{"index": i, "embedding": [float(len(text)), float(i)]} for i, text in enumerate(inputs)]
    # Out of order on purpose; vectors are matched by index.
    return httpx.Response(200, json={"object": "list", "data": list(reversed(data)), "model": "m"})


@pytest.mark.asyncio
async def test_embeddings_are_batched_and_ordered(make_client):
    client, rec = make_client(OpenAIClient, _embeddings)
    model = TinyBatchEmbeddingModel(client, "text-embedding-3-small", 2)
    result = await model.embed_texts(["a", "bb", "ccc", "dddd", "eeeee"])
    assert len(rec.requests) == 3  # nosec B101
    assert [rec.json(i)["input"] for i in range(3)] == [["a", "bb"], ["ccc", "dddd"], ["eeeee"]]  # nosec B101
    assert [e.document for e in result] == ["a", "bb", "ccc", "dddd", "eeeee"]  # nosec B101
    assert [e.vec[0] for e in result] == [1.0, 2.0, 3.0, 4.0, 5.0]  # nosec B101
    assert model.max_documents == 2  # nosec B101


@pytest.mark.asyncio
async def test_embedding_count_mismatch_is_decode_error(make_client):
    client, _ = make_client(OpenAIClient, httpx.Response(200, json={"data": [{"index": 0, "embedding": [0.1]}]}))
    with pytest.raises(DecodeError):
        await client.embedding_model("text-embedding-3-small").embed_texts(["one", "two"])


def test_known_and_unknown_dimensionality(make_client, relay_logs):
    client, _ = make_client(OpenAIClient)
    assert client.embedding_model("text-embedding-3-large").ndims == 3072  # nosec B101
    unknown = client.embedding_model("my-finetuned-embedder")
    assert unknown.ndims == 0 and not unknown.ndims_known  # nosec B101
    warnings = [e for e in relay_logs.events if e.get("event") == "embedding.ndims.unknown"]
    assert warnings and "embedding_model_with_ndims" in warnings[-1]["hint"]  # nosec B101
    assert client.embedding_model_with_ndims("my-finetuned-embedder", 512).ndims == 512  # nosec B101


def test_handles_are_immutable_and_share_client(make_client):
    client, _ = make_client(OpenAIClient)
    a = client.completion_model("gpt-4o")
    b = client.copy().completion_model("gpt-4o")
    assert a.client.http is b.client.http  # nosec B101
    with pytest.raises(AttributeError):
        a.model = "other"  # type: ignore[misc]
