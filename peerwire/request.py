"""Requests: a routed header plus a body."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Generic, TypeVar

from peerwire.model import TIMEOUT, HeaderMap, Version
from peerwire.peer_id import PeerId

T = TypeVar("T")
U = TypeVar("U")

_U64_MAX = 2**64 - 1
_NANOS_PER_SECOND = 1_000_000_000

Extensions = dict[type, Any]
"""Typed extensions: one value per type, keyed by that type."""


def _duration_to_nanos(timeout: timedelta | float | int) -> int:
    if isinstance(timeout, timedelta):
        nanos = (
            (timeout.days * 86_400 + timeout.seconds) * _NANOS_PER_SECOND
            + timeout.microseconds * 1_000
        )
    else:
        nanos = int(round(timeout * _NANOS_PER_SECOND))
    if nanos < 0:
        raise ValueError("timeout cannot be negative")
    return min(nanos, _U64_MAX)


def _parse_timeout(headers: HeaderMap) -> timedelta | None:
    """Read the timeout header; ``None`` if it is missing or invalid."""
    text = headers.get(TIMEOUT)
    if text is None or not text.isascii() or not text.isdigit():
        return None
    nanos = int(text)
    if nanos > _U64_MAX:
        return None
    seconds, rest = divmod(nanos, _NANOS_PER_SECOND)
    return timedelta(seconds=seconds, microseconds=rest / 1_000)


@dataclass
class RequestHeader:
    """Route, protocol version, headers and extensions of a request."""

    route: str = "/"
    version: Version = Version.V1
    headers: HeaderMap = field(default_factory=dict)
    extensions: Extensions = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: dict[str, Any], version: Version) -> RequestHeader:
        """Build a header from its wire form ``{"route", "headers"}``."""
        return cls(
            route=raw["route"],
            version=version,
            headers=dict(raw["headers"]),
        )

    def to_raw(self) -> dict[str, Any]:
        """Return the wire form: the route and the headers."""
        return {"route": self.route, "headers": dict(self.headers)}


@dataclass
class Request(Generic[T]):
    """A request body together with its header."""

    body: T
    head: RequestHeader = field(default_factory=RequestHeader)

    @classmethod
    def empty(cls) -> Request[bytes]:
        """A request with an empty byte body."""
        return cls(b"")

    @classmethod
    def from_parts(cls, parts: RequestHeader, body: T) -> Request[T]:
        return cls(body, parts)

    def into_parts(self) -> tuple[RequestHeader, T]:
        return self.head, self.body

    @property
    def route(self) -> str:
        return self.head.route

    @route.setter
    def route(self, value: str) -> None:
        self.head.route = value

    @property
    def version(self) -> Version:
        return self.head.version

    @property
    def headers(self) -> HeaderMap:
        return self.head.headers

    @property
    def extensions(self) -> Extensions:
        return self.head.extensions

    def with_route(self, route: str) -> Request[T]:
        self.head.route = route
        return self

    def with_header(self, key: str, value: str) -> Request[T]:
        self.head.headers[key] = value
        return self

    def with_extension(self, extension: object) -> Request[T]:
        self.head.extensions[type(extension)] = extension
        return self

    def peer_id(self) -> PeerId | None:
        """The id of the peer that sent this request, if known."""
        return self.head.extensions.get(PeerId)

    def map(self, func: Callable[[T], U]) -> Request[U]:
        """Return a request with the same header and a transformed body."""
        return Request(func(self.body), self.head)

    def set_timeout(self, timeout: timedelta | float | int) -> None:
        """Store the timeout in nanoseconds in the timeout header.

        Numbers are taken as seconds.
        """
        self.head.headers[TIMEOUT] = str(_duration_to_nanos(timeout))

    def with_timeout(self, timeout: timedelta | float | int) -> Request[T]:
        self.set_timeout(timeout)
        return self

    def timeout(self) -> timedelta | None:
        """The timeout previously set, or ``None`` if unset or invalid."""
        return _parse_timeout(self.head.headers)


def into_request(value: Any) -> Request[Any]:
    """Wrap a message in a Request; a Request is returned as is."""
    if isinstance(value, Request):
        return value
    return Request(value)