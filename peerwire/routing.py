"""Routing of byte-level requests to services by their route path."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any

from peerwire.request import Request
from peerwire.response import Response, StatusCode, into_response


class InvalidRouteError(ValueError):
    """A route path could not be registered."""


async def _invoke(service: Any, request: Request[bytes]) -> Response[bytes]:
    handler = getattr(service, "call", service)
    result = handler(request)
    if inspect.isawaitable(result):
        result = await result
    return result


def not_found(request: Request[Any]) -> Response[bytes]:
    """Respond with ``404 Not Found`` to any request."""
    return into_response(StatusCode.NOT_FOUND)


class Route:
    """A service stored in a :class:`Router`.

    The service is either an object with a ``call`` method or a callable;
    both may be plain functions or coroutine functions.
    """

    def __init__(self, service: Any) -> None:
        self._service = service

    async def call(self, request: Request[bytes]) -> Response[bytes]:
        return await _invoke(self._service, request)

    def __repr__(self) -> str:
        return "Route"


class _Kind(Enum):
    STATIC = "static"
    PARAM = "param"
    CATCHALL = "catchall"


@dataclass(frozen=True)
class _Segment:
    kind: _Kind
    text: str


def _parse_path(path: str) -> tuple[_Segment, ...]:
    if not path:
        raise InvalidRouteError('Paths must start with a `/`. Use "/" for root routes')
    if not path.startswith("/"):
        raise InvalidRouteError("Paths must start with a `/`")
    parts = path.split("/")
    segments = []
    for position, part in enumerate(parts):
        if part.startswith("*"):
            if len(part) == 1:
                raise InvalidRouteError("Invalid route: wildcards must be named")
            if position != len(parts) - 1:
                raise InvalidRouteError(
                    "Invalid route: catch-all parameters are only allowed at the end of a route"
                )
            segments.append(_Segment(_Kind.CATCHALL, part[1:]))
        elif part.startswith(":"):
            if len(part) == 1:
                raise InvalidRouteError("Invalid route: wildcards must be named")
            segments.append(_Segment(_Kind.PARAM, part[1:]))
        else:
            segments.append(_Segment(_Kind.STATIC, part))
    return tuple(segments)


def _conflicts(first: tuple[_Segment, ...], second: tuple[_Segment, ...]) -> bool:
    for a, b in zip(first, second):
        if _Kind.CATCHALL in (a.kind, b.kind) or a.kind is not b.kind:
            return True
        if a.kind is _Kind.STATIC and a.text != b.text:
            return False
    return len(first) == len(second)


def _matches(pattern: tuple[_Segment, ...], parts: list[str]) -> bool:
    for position, segment in enumerate(pattern):
        if segment.kind is _Kind.CATCHALL:
            return len(parts) > position
        if position >= len(parts):
            return False
        part = parts[position]
        if segment.kind is _Kind.PARAM:
            if not part:
                return False
        elif part != segment.text:
            return False
    return len(parts) == len(pattern)


class Router:
    """Dispatches requests to the route whose path matches the request route.

    Paths start with ``/``; a segment ``:name`` matches any one non-empty
    segment and a final ``*name`` matches the rest of the route. Requests
    that match no route get ``404 Not Found``.
    """

    def __init__(self) -> None:
        self._routes: dict[str, tuple[tuple[_Segment, ...], Route]] = {}
        self._fallback = Route(not_found)

    def route(self, path: str, service: Any) -> Router:
        """Register ``service`` under ``path``; returns the router."""
        segments = _parse_path(path)
        if isinstance(service, Router):
            raise InvalidRouteError(
                "Invalid route: `Router.route` cannot be used with `Router`s."
            )
        route = service if isinstance(service, Route) else Route(service)
        for existing, (other, _) in self._routes.items():
            if _conflicts(segments, other):
                raise InvalidRouteError(
                    "Invalid route: insertion failed due to conflict with "
                    f"previously registered route: {existing}"
                )
        self._routes[path] = (segments, route)
        return self

    def add_rpc_service(self, service: Any) -> Router:
        """Register an RPC service under ``/<SERVICE_NAME>/*rest``."""
        return self.route(f"/{service.SERVICE_NAME}/*rest", service)

    def merge(self, other: Router) -> Router:
        """Add every route of ``other`` to this router."""
        for path, (_, route) in other._routes.items():
            self.route(path, route)
        return self

    def route_layer(self, layer: Any) -> Router:
        """Wrap every route registered so far with ``layer``.

        ``layer`` is an object with a ``layer`` method or a callable; it
        receives a :class:`Route` and returns the wrapping service. Requests
        that match no route do not pass through it.
        """
        apply = getattr(layer, "layer", layer)
        self._routes = {
            path: (segments, Route(apply(route)))
            for path, (segments, route) in self._routes.items()
        }
        return self

    async def call(self, request: Request[bytes]) -> Response[bytes]:
        parts = request.route.split("/")
        for segments, route in self._routes.values():
            if _matches(segments, parts):
                return await route.call(request)
        return await self._fallback.call(request)

    def __repr__(self) -> str:
        return f"Router(paths={list(self._routes)!r})"