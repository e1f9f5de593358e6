"""
Endpoint descriptors.

An `Endpoint` is a passive value describing one HTTP call. The client reads it and
never mutates it; callers build a fresh one per call.

Parameters are a closed, statically-typed model: either a JSON object made of
`JsonValue`s, or a pydantic model that dumps to one.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeAlias, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

JsonValue: TypeAlias = "str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]"
JsonObject: TypeAlias = Mapping[str, JsonValue]
Parameters: TypeAlias = "JsonObject | BaseModel"


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """One HTTP call: where it goes, what it sends, and optionally how to read the reply.

    `decoder`, when set, takes the raw 2xx body and returns the result; it wins over
    any `response_type` passed to the client.
    """

    base_url: str
    path: str = ""
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    parameters: Parameters | None = None
    decoder: Callable[[bytes], T] | None = None
