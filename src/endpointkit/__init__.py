"""endpointkit: build a request from an endpoint, send it, decode the JSON reply."""

from endpointkit.client import APIClient
from endpointkit.core.http import HttpTransport, HttpxTransport, Request, RequestFailed, Response
from endpointkit.domain.models import Endpoint, HTTPMethod, JsonObject, JsonValue
from endpointkit.errors import (
    BadStatus,
    BadURL,
    DecodeFailure,
    EncodingFailure,
    ErrorKind,
    NetworkError,
    TransportFailure,
    UnknownError,
)
from endpointkit.network import Network

__all__ = [
    "APIClient",
    "BadStatus",
    "BadURL",
    "DecodeFailure",
    "EncodingFailure",
    "Endpoint",
    "ErrorKind",
    "HTTPMethod",
    "HttpTransport",
    "HttpxTransport",
    "JsonObject",
    "JsonValue",
    "Network",
    "NetworkError",
    "Request",
    "RequestFailed",
    "Response",
    "TransportFailure",
    "UnknownError",
]

__version__ = "0.1.0"
