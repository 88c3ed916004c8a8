"""Responses: a status header plus a body."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Generic, TypeVar

from peerwire.model import HeaderMap, Version
from peerwire.peer_id import PeerId

T = TypeVar("T")
U = TypeVar("U")

Extensions = dict[type, Any]


class InvalidStatusCodeError(ValueError):
    """A numeric status code that has no StatusCode."""

    def __init__(self, code: int) -> None:
        super().__init__(f"invalid StatusCode {code}")
        self.code = code


_STATUS_TEXT = {
    200: "Success",
    400: "Bad Request",
    404: "Not Found",
    408: "Request Timeout",
    429: "Too Many Requests",
    500: "Internal Server Error",
    505: "Version Not Supported",
    520: "Unknown",
}


class StatusCode(IntEnum):
    SUCCESS = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    REQUEST_TIMEOUT = 408
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    VERSION_NOT_SUPPORTED = 505
    UNKNOWN = 520

    @classmethod
    def new(cls, code: int) -> StatusCode:
        """Look up a status code, raising InvalidStatusCodeError if unknown."""
        try:
            return cls(code)
        except ValueError:
            raise InvalidStatusCodeError(code) from None

    def to_u16(self) -> int:
        return int(self)

    def is_success(self) -> bool:
        return 200 <= self <= 299

    def is_client_error(self) -> bool:
        return 400 <= self <= 499

    def is_server_error(self) -> bool:
        return 500 <= self <= 599

    def __str__(self) -> str:
        return f"{int(self)} {_STATUS_TEXT[int(self)]}"


@dataclass
class ResponseHeader:
    """Status, protocol version, headers and extensions of a response."""

    status: StatusCode = StatusCode.SUCCESS
    version: Version = Version.V1
    headers: HeaderMap = field(default_factory=dict)
    extensions: Extensions = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: dict[str, Any], version: Version) -> ResponseHeader:
        """Build a header from its wire form ``{"status", "headers"}``."""
        return cls(
            status=StatusCode.new(raw["status"]),
            version=version,
            headers=dict(raw["headers"]),
        )

    def to_raw(self) -> tuple[dict[str, Any], Extensions]:
        """Return the wire form and, separately, the extensions."""
        raw = {"status": self.status.to_u16(), "headers": dict(self.headers)}
        return raw, self.extensions


@dataclass
class Response(Generic[T]):
    """A response body together with its header."""

    body: T
    head: ResponseHeader = field(default_factory=ResponseHeader)

    @classmethod
    def empty(cls) -> Response[bytes]:
        """A successful response with an empty byte body."""
        return cls(b"")

    @classmethod
    def from_parts(cls, parts: ResponseHeader, body: T) -> Response[T]:
        return cls(body, parts)

    def into_parts(self) -> tuple[ResponseHeader, T]:
        return self.head, self.body

    @property
    def status(self) -> StatusCode:
        return self.head.status

    @status.setter
    def status(self, value: StatusCode) -> None:
        self.head.status = value

    @property
    def version(self) -> Version:
        return self.head.version

    @property
    def headers(self) -> HeaderMap:
        return self.head.headers

    @property
    def extensions(self) -> Extensions:
        return self.head.extensions

    def with_status(self, status: StatusCode) -> Response[T]:
        self.head.status = status
        return self

    def with_header(self, key: str, value: str) -> Response[T]:
        self.head.headers[key] = value
        return self

    def with_extension(self, extension: object) -> Response[T]:
        self.head.extensions[type(extension)] = extension
        return self

    def peer_id(self) -> PeerId | None:
        """The id of the peer that produced this response, if known."""
        return self.head.extensions.get(PeerId)

    def map(self, func: Callable[[T], U]) -> Response[U]:
        """Return a response with the same header and a transformed body."""
        return Response(func(self.body), self.head)


def into_response(value: Any) -> Response[bytes]:
    """Turn ``None``, a StatusCode, or anything with ``into_response`` into a response."""
    if value is None:
        return Response(b"")
    if isinstance(value, StatusCode):
        return Response(b"").with_status(value)
    convert = getattr(value, "into_response", None)
    if callable(convert):
        return convert()
    raise TypeError(f"cannot convert {value!r} into a response")