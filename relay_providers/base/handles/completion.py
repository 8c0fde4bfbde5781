"""Base completion model handle.

Provider handles subclass :class:`BaseCompletionModel` and fill in the wire
specifics: the payload builder, the endpoint paths, the response shape, the
response conversion and the stream translator. The request flow itself
(send, decode, time, log, stream-directive merge, stream opening) lives here
once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Mapping, Type

import httpx
from pydantic import BaseModel

from ..json_utils import merge
from ..models import CompletionRequest, CompletionResponse
from ..streaming import StreamingCompletionResponse, Translator, open_stream
from .common import CallInfo, execute_json

if TYPE_CHECKING:
    from ..client import ProviderClient


@dataclass(frozen=True)
class BaseCompletionModel:
    """Completion handle: shared client plus model identifier (no I/O on creation).

    Class attributes:
        RESPONSE_SHAPE: pydantic model of the provider's success body.
        STREAM_DIRECTIVE: keys shallow-merged over the payload before streaming.
        REQUIRES_END_SIGNAL: whether a stream body ending without the
            provider's end-of-stream signal is a failure.
    """

    client: "ProviderClient"
    model: str

    RESPONSE_SHAPE: ClassVar[Type[BaseModel]]
    STREAM_DIRECTIVE: ClassVar[Mapping[str, Any]] = {}
    REQUIRES_END_SIGNAL: ClassVar[bool] = True

    # -- provider hooks -------------------------------------------------
    def create_completion_request(self, request: CompletionRequest) -> Dict[str, Any]:
        raise NotImplementedError

    def completion_path(self) -> str:
        raise NotImplementedError

    def to_completion_response(self, wire: Any) -> CompletionResponse:
        raise NotImplementedError

    def stream_translator(self) -> Translator:
        raise NotImplementedError

    def create_stream_request(self, payload: Dict[str, Any]) -> httpx.Request:
        """Build the streaming request; defaults to an SSE POST on the completion path."""
        return self.client.post_sse(self.completion_path(), json=payload, model=self.model)

    # -- flow -------------------------------------------------------------
    def stream_payload(self, request: CompletionRequest) -> Dict[str, Any]:
        """Return the completion payload with the streaming directive merged in."""
        return merge(self.create_completion_request(request), self.STREAM_DIRECTIVE)

    async def completion(self, request: CompletionRequest) -> CompletionResponse:
        payload = self.create_completion_request(request)
        http_request = self.client.post(self.completion_path(), json=payload, model=self.model)
        wire, info = await execute_json(
            self.client, http_request, self.RESPONSE_SHAPE, model=self.model, operation="completion"
        )
        result = self.to_completion_response(wire)
        _stamp(result, info)
        return result

    async def stream(self, request: CompletionRequest) -> StreamingCompletionResponse:
        http_request = self.create_stream_request(self.stream_payload(request))
        return await open_stream(
            self.client,
            http_request,
            model=self.model,
            translator=self.stream_translator(),
            requires_end_signal=self.REQUIRES_END_SIGNAL,
        )


def _stamp(result: CompletionResponse, info: CallInfo) -> None:
    result.meta.record_call(info.http_status, info.latency_ms, info.request_id)


__all__ = ["BaseCompletionModel"]
