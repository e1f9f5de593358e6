"""
Generic API client.

`APIClient.request()` is the single client operation: build the request, send it once,
check the status, decode the body. The coroutine either returns one decoded value or
raises one `NetworkError`; there are no retries and no partial results.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, overload

import httpx

from endpointkit.core.http import HttpTransport, HttpxTransport, RequestFailed, Response
from endpointkit.decoding import resolve_decoder, run_decoder
from endpointkit.domain.models import Endpoint
from endpointkit.errors import BadStatus, BadURL, TransportFailure, UnknownError
from endpointkit.request import build_request

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Used when the transport hands back a response without a readable status line.
MISSING_STATUS_CODE = 500


def is_success(status: int) -> bool:
    return 200 <= status <= 299


class APIClient:
    """Executes `Endpoint`s over an `HttpTransport`.

    Without an explicit transport, an `HttpxTransport` configured from settings is
    created and closed by `aclose()` (or `async with`).
    """

    def __init__(self, transport: HttpTransport | None = None):
        self._owns_transport = transport is None
        self._transport: HttpTransport = transport if transport is not None else HttpxTransport()

    @overload
    async def request(self, endpoint: Endpoint[Any], response_type: type[T]) -> T: ...

    @overload
    async def request(self, endpoint: Endpoint[T], response_type: None = None) -> T: ...

    async def request(self, endpoint: Endpoint[Any], response_type: Any = None) -> Any:
        """Execute `endpoint` and decode its 2xx body into `response_type`.

        Raises:
            BadURL: The URL cannot be built, or the transport rejected it.
            EncodingFailure: The parameters cannot be serialized.
            BadStatus: Non-2xx status; carries the code and the raw body.
            DecodeFailure: 2xx body does not match `response_type`; carries the raw body.
            TransportFailure: The exchange did not complete.
            UnknownError: The transport raised something unclassified.

        A `response_type` pydantic cannot validate raises
        `pydantic.PydanticSchemaGenerationError` before anything is sent.
        """
        decoder = resolve_decoder(response_type, endpoint.decoder)
        request = build_request(endpoint)

        try:
            response = await self._transport.send(request)
        except RequestFailed as exc:
            if isinstance(exc.inner, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
                raise BadURL(request.url, str(exc.inner)) from exc.inner
            raise TransportFailure(exc.inner) from exc.inner
        except Exception as exc:
            raise UnknownError(exc) from exc

        body = self._check_status(response)
        return run_decoder(body, decoder)

    @staticmethod
    def _check_status(response: Response) -> bytes:
        status = response.status if response.status is not None else MISSING_STATUS_CODE
        if response.status is None or not is_success(status):
            logger.debug("Non-success status %s", status)
            raise BadStatus(status, response.body)
        return response.body

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
