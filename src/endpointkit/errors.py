"""Typed errors raised by `APIClient.request` and `Network.fetch`.

Every failed call raises exactly one `NetworkError` subclass, chained to its cause.
Callers branch on the class (or on `kind`) to decide retry policy themselves.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    bad_url = "bad_url"
    bad_status = "bad_status"
    decode_failure = "decode_failure"
    encoding_failure = "encoding_failure"
    transport_failure = "transport_failure"
    unknown = "unknown"


class NetworkError(Exception):
    """Base class for all client failures."""

    kind: ErrorKind = ErrorKind.unknown


class BadURL(NetworkError):
    """Base URL and path do not form a usable absolute URL."""

    kind = ErrorKind.bad_url

    def __init__(self, url: str, reason: str = "not an absolute http(s) URL"):
        super().__init__(f"bad URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class BadStatus(NetworkError):
    """The server answered outside 2xx (or without a readable status)."""

    kind = ErrorKind.bad_status

    def __init__(self, status_code: int, body: bytes):
        super().__init__(f"unexpected status {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeFailure(NetworkError):
    """A 2xx body did not match the requested result type."""

    kind = ErrorKind.decode_failure

    def __init__(self, error: Exception, body: bytes):
        super().__init__(f"could not decode response body: {error}")
        self.error = error
        self.body = body


class EncodingFailure(NetworkError):
    """Parameters could not be serialized; nothing was sent."""

    kind = ErrorKind.encoding_failure

    def __init__(self, error: Exception):
        super().__init__(f"could not encode parameters: {error}")
        self.error = error


class TransportFailure(NetworkError):
    """The exchange did not complete (DNS, connect, read, protocol)."""

    kind = ErrorKind.transport_failure

    def __init__(self, error: Exception):
        super().__init__(f"transport failure: {error!r}")
        self.error = error


class UnknownError(NetworkError):
    """The transport raised something outside the other categories."""

    kind = ErrorKind.unknown

    def __init__(self, error: Exception):
        super().__init__(f"unclassified failure: {error!r}")
        self.error = error
