"""
Request building.

Turns an `Endpoint` into a transport `Request`:
- base URL + path -> absolute URL (or `BadURL`),
- GET parameters -> one query item per key,
- POST parameters -> JSON body (or `EncodingFailure`),
- headers copied verbatim.

Nothing here touches the network.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from endpointkit.core.http import Request
from endpointkit.domain.models import Endpoint, HTTPMethod, Parameters
from endpointkit.errors import BadURL, EncodingFailure


def build_url(base_url: str, path: str) -> httpx.URL:
    """Put `path` in place of the path of `base_url`.

    `path` must be empty or start with `/`. Query items on the base are kept here;
    `build_request` replaces them for GET.
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise BadURL(base_url, str(exc)) from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise BadURL(base_url)

    if path and not path.startswith("/"):
        raise BadURL(f"{base_url} + {path}", "path must be empty or start with '/'")

    try:
        return url.copy_with(path=path)
    except httpx.InvalidURL as exc:
        raise BadURL(f"{base_url} + {path}", str(exc)) from exc


def query_value(value: Any) -> str:
    """Textual form of one query parameter value."""
    # bool is an int subclass; check it first.
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    raise TypeError(f"Unsupported query parameter type: {type(value).__name__}")


def parameters_as_dict(parameters: Parameters) -> dict[str, Any]:
    """Flatten a parameter bag into a plain JSON-compatible mapping."""
    if isinstance(parameters, BaseModel):
        return parameters.model_dump(mode="json")
    if isinstance(parameters, Mapping):
        return dict(parameters)
    raise TypeError(f"Unsupported parameters type: {type(parameters).__name__}")


def build_request(endpoint: Endpoint[Any]) -> Request:
    """Build the transport request for `endpoint`.

    For GET the query string is rebuilt from the parameters alone; query items on
    the base URL are dropped. For POST the base URL is used as-is.

    Raises:
        BadURL: If base URL + path is not an absolute http(s) URL.
        EncodingFailure: If the parameters cannot be serialized.
    """
    url = build_url(endpoint.base_url, endpoint.path)
    body: bytes | None = None
    items: list[tuple[str, str]] = []

    if endpoint.parameters is not None:
        try:
            params = parameters_as_dict(endpoint.parameters)
            if endpoint.method is HTTPMethod.GET:
                items = [(key, query_value(value)) for key, value in params.items()]
            elif endpoint.method is HTTPMethod.POST:
                body = json.dumps(params, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodingFailure(exc) from exc

    if endpoint.method is HTTPMethod.GET:
        url = url.copy_with(params=items)

    return Request(
        method=endpoint.method,
        url=str(url),
        headers=dict(endpoint.headers),
        body=body,
    )
