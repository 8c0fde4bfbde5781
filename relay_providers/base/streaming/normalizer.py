"""Streaming normalizer: provider-native stream bodies to canonical events.

Lifecycle of one stream::

    Idle -> RequestBuilt -> Sent -> Streaming -> {Completed, Failed}

The completion handle builds the payload and merges the provider's streaming
directive (RequestBuilt), :func:`open_stream` sends it and checks the status
(Sent), and :class:`StreamingCompletionResponse` decodes frames, runs them
through the provider translator and yields :class:`StreamEvent` objects
(Streaming). Exactly one terminal event ends the sequence: a clean one when
the provider signalled the end, a failure (``error`` set) on disconnects,
undecodable chunks, provider error events or a body that ends without the
provider's end-of-stream signal. Deltas already yielded are never retracted.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, AsyncIterator, Callable, Iterable, List, Optional, Union

import httpx

from ..constants import STREAM_ALREADY_CONSUMED, STREAM_CLOSED_EARLY
from ..errors import (
    RETRYABLE_CODES,
    ErrorCode,
    ProviderError,
    RequestError,
    StreamError,
    classify_exception,
    code_for_status,
)
from ..logging import LogContext, get_logger, log_event
from ..models import CompletionResponse
from ..response import error_message_from_body
from .decoders import END_OF_STREAM, StreamFrame, _EndOfStream, iter_stream_payloads
from .streaming import StreamEvent, accumulate_events
from .streaming_finalize import finalize_stream
from .streaming_metrics import StreamMetrics, apply_token_usage

if TYPE_CHECKING:
    from ..client import ProviderClient

TranslatorItem = Union[StreamEvent, _EndOfStream]
Translator = Callable[[StreamFrame], Iterable[TranslatorItem]]
Decoder = Callable[[httpx.Response], AsyncIterator[StreamFrame]]

_MAX_ERROR_CHARS = 260


def _error_text(code: ErrorCode | str, message: str) -> str:
    value = code.value if isinstance(code, ErrorCode) else code
    return f"{value}:{message[:_MAX_ERROR_CHARS]}"


class StreamingCompletionResponse:
    """Forward-only, single-consumer sequence of canonical stream events.

    Iterate it with ``async for`` exactly once; a second iteration raises
    :class:`StreamError`. Leaving an ``async with`` block, breaking out of the
    loop (followed by ``aclose``) or reaching the terminal event releases the
    HTTP connection.

    Attributes:
        provider / model: Identify the stream in events and logs.
        metrics: :class:`StreamMetrics` collected while streaming.
        final: The terminal event once it has been produced.
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        provider: str,
        model: str,
        translator: Translator,
        requires_end_signal: bool = True,
        decoder: Decoder = iter_stream_payloads,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self.response = response
        self.provider = provider
        self.model = model
        self._translator = translator
        self._requires_end_signal = requires_end_signal
        self._decoder = decoder
        self._logger = logger or get_logger(provider)
        self.ctx = ctx or LogContext(provider=provider, model=model)
        self.metrics = StreamMetrics()
        self.final: Optional[StreamEvent] = None
        self._started = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> AsyncIterator[StreamEvent]:
        if self._started:
            raise StreamError(STREAM_ALREADY_CONSUMED, self.provider, model=self.model)
        self._started = True
        return self._run()

    async def __aenter__(self) -> "StreamingCompletionResponse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying HTTP connection (idempotent)."""
        if self._closed:
            return
        self._closed = True
        await self.response.aclose()

    async def collect(self) -> CompletionResponse:
        """Drain the stream and fold every event into a ``CompletionResponse``."""
        events: List[StreamEvent] = [event async for event in self]
        result = accumulate_events(events)
        result.meta.record_call(self.response.status_code, self.metrics.total_duration_ms)
        return result

    def _record(self, t0: float) -> None:
        if self.metrics.emitted == 0:
            self.metrics.time_to_first_token_ms = (time.perf_counter() - t0) * 1000.0
        self.metrics.emitted += 1

    async def _run(self) -> AsyncIterator[StreamEvent]:
        t0 = time.perf_counter()
        log_event(self._logger, "stream.start", self.ctx, status=self.response.status_code)
        error: Optional[str] = None
        ended = False
        frames = self._decoder(self.response)
        try:
            async for frame in frames:
                for item in self._translator(frame):
                    if item is END_OF_STREAM:
                        ended = True
                        break
                    if item.usage:
                        apply_token_usage(self.metrics, item.usage)
                    if not item.has_content():
                        continue
                    self._record(t0)
                    yield item
                if ended:
                    break
            if not ended and self._requires_end_signal:
                error = _error_text(ErrorCode.STREAM, STREAM_CLOSED_EARLY)
        except ProviderError as exc:
            error = _error_text(exc.code, exc.message)
        except Exception as exc:
            error = _error_text(classify_exception(exc), str(exc) or type(exc).__name__)
        finally:
            await frames.aclose()
            await self.aclose()
        self.metrics.total_duration_ms = (time.perf_counter() - t0) * 1000.0
        self.final = finalize_stream(
            logger=self._logger,
            ctx=self.ctx,
            provider=self.provider,
            model=self.model,
            metrics=self.metrics,
            error=error,
        )
        yield self.final


async def open_stream(
    client: "ProviderClient",
    request: httpx.Request,
    *,
    model: str,
    translator: Translator,
    requires_end_signal: bool = True,
) -> StreamingCompletionResponse:
    """Send ``request`` with a streamed body and wrap it for normalization.

    A non-2xx status is read in full, its error envelope decoded and the
    connection closed before :class:`RequestError` is raised; no stream is
    returned in that case.
    """
    provider = client.provider_name
    response = await client.send(request, stream=True, model=model)
    if not response.is_success:
        try:
            body = await response.aread()
        finally:
            await response.aclose()
        status = response.status_code
        message = error_message_from_body(body) or f"HTTP {status}"
        code = code_for_status(status)
        log_event(
            client.logger,
            "stream.open_error",
            client.log_context(model),
            level=logging.WARNING,
            status=status,
            error_code=code.value,
            error=message,
        )
        raise RequestError(
            message,
            provider,
            code=code,
            model=model,
            status_code=status,
            retryable=code in RETRYABLE_CODES,
        )
    return StreamingCompletionResponse(
        response,
        provider=provider,
        model=model,
        translator=translator,
        requires_end_signal=requires_end_signal,
        logger=client.logger,
    )


__all__ = [
    "StreamingCompletionResponse",
    "Translator",
    "TranslatorItem",
    "open_stream",
]
