"""Request execution shared by every model handle.

A handle builds an ``httpx.Request`` through its client's scoped request
factory; :func:`execute_json` sends it, decodes the body into the expected
success shape and times the call. Failures propagate as typed
``ProviderError`` subclasses after one structured log line.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from ..errors import ProviderError
from ..logging import log_event
from ..response import read_api_response

if TYPE_CHECKING:
    from ..client import ProviderClient

T = TypeVar("T", bound=BaseModel)

_REQUEST_ID_HEADERS = ("request-id", "x-request-id")


@dataclass(frozen=True)
class CallInfo:
    """Transport facts about one completed call."""

    http_status: int
    latency_ms: float
    request_id: Optional[str] = None


def request_id_from(response: httpx.Response) -> Optional[str]:
    for name in _REQUEST_ID_HEADERS:
        if value := response.headers.get(name):
            return value
    return None


async def execute_json(
    client: "ProviderClient",
    request: httpx.Request,
    shape: Type[T],
    *,
    model: str,
    operation: str,
) -> tuple[T, CallInfo]:
    """Send ``request`` and decode the JSON body into ``shape``.

    Logs ``<operation>.start`` before sending and ``<operation>.end`` or
    ``<operation>.error`` afterwards.
    """
    ctx = client.log_context(model)
    log_event(client.logger, f"{operation}.start", ctx, level=logging.DEBUG, url=client.redact(request.url))
    t0 = time.perf_counter()
    try:
        response = await client.send(request, model=model)
        wire = read_api_response(response, shape, provider=client.provider_name, model=model)
    except ProviderError as exc:
        log_event(
            client.logger,
            f"{operation}.error",
            ctx,
            level=logging.WARNING,
            **exc.log_fields(),
        )
        raise
    info = CallInfo(
        http_status=response.status_code,
        latency_ms=(time.perf_counter() - t0) * 1000.0,
        request_id=request_id_from(response),
    )
    log_event(
        client.logger,
        f"{operation}.end",
        ctx.with_ids(request_id=info.request_id),
        status=info.http_status,
        latency_ms=round(info.latency_ms, 2),
    )
    return wire, info


__all__ = ["CallInfo", "execute_json", "request_id_from"]
