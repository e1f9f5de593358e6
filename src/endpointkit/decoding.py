"""Response body decoding."""

from __future__ import annotations

import json
from collections.abc import Callable
from functools import partial
from typing import Any

from pydantic import TypeAdapter

from endpointkit.errors import DecodeFailure

BodyDecoder = Callable[[bytes], Any]


def resolve_decoder(response_type: Any = None, decoder: BodyDecoder | None = None) -> BodyDecoder:
    """Pick the callable that turns a 2xx body into the result.

    `decoder` wins when given; otherwise `response_type` is validated with pydantic in
    strict mode (models, dataclasses, TypedDicts, `list[...]`, ...); with neither, the
    body is parsed into plain JSON values.

    Raises:
        pydantic.PydanticSchemaGenerationError: If pydantic cannot handle `response_type`.
    """
    if decoder is not None:
        return decoder
    if response_type is None:
        return json.loads
    return partial(TypeAdapter(response_type).validate_json, strict=True)


def run_decoder(body: bytes, decoder: BodyDecoder) -> Any:
    """Apply `decoder` to `body`, turning parse and validation errors into `DecodeFailure`."""
    try:
        return decoder(body)
    except (TypeError, ValueError) as exc:
        raise DecodeFailure(exc, body) from exc


def decode_body(body: bytes, response_type: Any = None, *, decoder: BodyDecoder | None = None) -> Any:
    """Decode a successful response body.

    Raises:
        DecodeFailure: If the body is not valid JSON or does not match the type.
    """
    return run_decoder(body, resolve_decoder(response_type, decoder))
