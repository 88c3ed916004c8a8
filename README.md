# peerwire

Building blocks for request/response services between peers:

- `peerwire.peer_id` — `PeerId`, a 32-byte peer identity with hex display
  (`short_display`, `str`), JSON (`to_json` / `from_json`) and compact binary
  (`to_bincode` / `from_bincode`) forms; `Direction` and `ConnectionOrigin`.
- `peerwire.address` — dial-able addresses: `SocketAddress`, `HostAndPort` and
  `AddressString`, each with `to_socket_addrs()` and `resolve()`; `to_address`
  builds one from a string or a `(host, port)` pair.
- `peerwire.model` — `Version`, `PeerAffinity`, `PeerInfo`, the peer events
  `NewPeer` and `LostPeer`, `DisconnectReason`, and the header names
  `CONTENT_TYPE`, `STATUS_MESSAGE` and `TIMEOUT`.
- `peerwire.request` — `Request` and `RequestHeader`: a body with a route
  (default `/`), headers, typed extensions and an optional timeout.
- `peerwire.response` — `Response`, `ResponseHeader`, `StatusCode` and
  `into_response`.
- `peerwire.routing` — `Router`: path-based dispatch with `:name` and
  `*name` wildcards, merging and per-route layers; unmatched requests get
  `404 Not Found`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Routing

A service is either a callable or an object with a `call` method; both may be
plain functions or coroutine functions. `Router.call` is a coroutine.

```python
import asyncio

from peerwire.request import Request
from peerwire.response import Response, StatusCode
from peerwire.routing import Router


async def echo(request):
    return Response(request.body)


async def main():
    router = Router().route("/echo", echo)

    response = await router.call(Request(b"hi").with_route("/echo"))
    assert response.status is StatusCode.SUCCESS
    assert response.body == b"hi"

    missing = await router.call(Request(b"").with_route("/nowhere"))
    assert missing.status is StatusCode.NOT_FOUND


asyncio.run(main())
```

Adding a path that is empty, does not start with `/`, or conflicts with a
route already registered raises `InvalidRouteError`, as does passing a
`Router` as a route's service. `Router.merge(other)` adds every route of
another router; `Router.route_layer(layer)` wraps the routes registered so
far (not the fallback) with `layer`, a callable or an object with a `layer`
method that receives a `Route`. `Router.add_rpc_service(service)` registers a
service under `/<service.SERVICE_NAME>/*rest`.

## Requests and responses

```python
from datetime import timedelta

from peerwire.request import Request
from peerwire.response import StatusCode, into_response

request = Request(b"payload").with_route("/echo").with_timeout(timedelta(seconds=30))
assert request.headers["timeout"] == "30000000000"
assert request.timeout() == timedelta(seconds=30)

response = into_response(StatusCode.NOT_FOUND)
print(response.status)  # 404 Not Found
```

`StatusCode.new(code)` raises `InvalidStatusCodeError` for a code it does not
know. `RequestHeader.to_raw()` / `from_raw()` and `ResponseHeader.to_raw()` /
`from_raw()` convert headers to and from their wire form as plain dicts.

## Peer identities and addresses

```python
from peerwire.address import to_address
from peerwire.peer_id import PeerId

peer_id = PeerId(bytes([42] * 32))
print(peer_id.short_display(4))  # 2a2a2a2a
assert PeerId.from_json(peer_id.to_json()) == peer_id
assert PeerId.from_bincode(peer_id.to_bincode()) == peer_id

address = to_address("127.0.0.1:8080")
print(address.resolve())  # 127.0.0.1:8080
```

`HostAndPort` and host-name `AddressString`s are looked up with the system
resolver; an `AddressString` with no port or a bad port raises `AddressError`.

## What this package does not do

It has no network transport: it does not bind, listen, connect to peers or
send requests over the wire; `Router.call` dispatches requests in-process.
It has no codecs for turning message objects into request bodies, and no
RPC client or server helpers: bodies are whatever the services put in them,
usually `bytes`.