"""
Type-bound front door.

`Network[T]` fixes the result type once and exposes `fetch(endpoint) -> T`. It is a thin
wrapper over `APIClient` with identical error semantics.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from endpointkit.client import APIClient
from endpointkit.domain.models import Endpoint

T = TypeVar("T")


class Network(Generic[T]):
    def __init__(self, response_type: type[T], client: APIClient | None = None):
        self._response_type = response_type
        self._owns_client = client is None
        self._client = client if client is not None else APIClient()

    @property
    def response_type(self) -> type[T]:
        return self._response_type

    async def fetch(self, endpoint: Endpoint[Any]) -> T:
        """Execute `endpoint` and return its body decoded as `T`."""
        return await self._client.request(endpoint, self._response_type)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Network[T]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
