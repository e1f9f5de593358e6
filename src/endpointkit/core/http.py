"""
HTTP transport.

This module is the only place that talks to the network. It defines the small
request/response values exchanged with the client and an httpx-backed transport.

Design goals:
- One operation: send a fully-built request, return (status, headers, body) or fail.
- No retries, no status interpretation, no JSON handling; the client owns all of that.
- Timeouts come from settings; connection reuse is left entirely to httpx.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from endpointkit.config.settings import HttpSettings, get_settings
from endpointkit.domain.models import HTTPMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """A fully-formed transport request."""

    method: HTTPMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class Response:
    """Raw transport response.

    `status` is None when the transport could not interpret a status line.
    """

    status: int | None
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class RequestFailed(Exception):
    """The exchange did not complete; `inner` is the transport's own error."""

    inner: Exception

    def __str__(self) -> str:
        return f"request failed: {self.inner!r}"


class HttpTransport(Protocol):
    async def send(self, request: Request) -> Response: ...


class HttpxTransport:
    """`HttpTransport` backed by `httpx.AsyncClient`.

    Pass `client` to reuse an existing `httpx.AsyncClient` (it is then left open on
    `aclose()`); otherwise one is created from settings and owned by this transport.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, settings: HttpSettings | None = None):
        if client is None:
            http_settings = settings or get_settings().http
            client = httpx.AsyncClient(
                timeout=http_settings.timeout_seconds,
                follow_redirects=http_settings.follow_redirects,
            )
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    async def send(self, request: Request) -> Response:
        logger.debug("Sending %s %s", request.method.value, request.url)
        try:
            resp = await self._client.request(
                request.method.value,
                request.url,
                headers=list(request.headers.items()),
                content=request.body,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RequestFailed(exc) from exc

        logger.debug("Received %s for %s %s", resp.status_code, request.method.value, request.url)
        return Response(status=resp.status_code, body=resp.content, headers=dict(resp.headers))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
