from datetime import timedelta

import pytest

from peerwire.model import TIMEOUT, Version
from peerwire.peer_id import PeerId
from peerwire.request import Request, RequestHeader, into_request


def test_default_header_route_is_root():
    request = Request(b"abc")
    assert request.route == "/"
    assert request.version == Version.V1
    assert request.headers == {}


def test_set_timeout_formats_nanoseconds():
    request = Request(None)
    request.set_timeout(timedelta(seconds=30))
    assert request.headers["timeout"] == "30000000000"


def test_with_timeout_formats_nanoseconds():
    request = Request(None).with_timeout(timedelta(seconds=30))
    assert request.headers.get("timeout") == str(30 * 1_000_000_000)


def test_timeout_round_trip():
    request = Request(None).with_timeout(timedelta(seconds=30))
    assert request.timeout() == timedelta(seconds=30)


def test_timeout_from_seconds_number():
    request = Request(None).with_timeout(1.5)
    assert request.headers[TIMEOUT] == "1500000000"
    assert request.timeout() == timedelta(seconds=1.5)


def test_timeout_missing_is_none():
    assert Request(None).timeout() is None


def test_timeout_invalid_is_none():
    request = Request(None).with_header(TIMEOUT, "soon")
    assert request.timeout() is None


def test_timeout_too_large_is_none():
    request = Request(None).with_header(TIMEOUT, str(2**64))
    assert request.timeout() is None


def test_negative_timeout_rejected():
    with pytest.raises(ValueError):
        Request(None).set_timeout(timedelta(seconds=-1))


def test_with_route_and_setter():
    request = Request(b"").with_route("/echo")
    assert request.route == "/echo"
    request.route = "/other"
    assert request.head.route == "/other"


def test_with_header():
    request = Request(b"").with_header("a", "b")
    assert request.headers == {"a": "b"}


def test_peer_id_from_extension():
    peer_id = PeerId(bytes([7] * 32))
    request = Request(b"").with_extension(peer_id)
    assert request.peer_id() == peer_id


def test_peer_id_absent():
    assert Request(b"").peer_id() is None


def test_empty():
    assert Request.empty().body == b""


def test_parts_round_trip():
    header = RequestHeader(route="/x", headers={"k": "v"})
    request = Request.from_parts(header, 5)
    parts, body = request.into_parts()
    assert parts is header
    assert body == 5


def test_map_keeps_header():
    request = Request("hello").with_route("/r")
    mapped = request.map(str.encode)
    assert mapped.body == b"hello"
    assert mapped.route == "/r"


def test_raw_round_trip():
    header = RequestHeader(route="/svc/m", headers={"content-type": "json"})
    header.extensions[int] = 3
    raw = header.to_raw()
    assert raw == {"route": "/svc/m", "headers": {"content-type": "json"}}
    back = RequestHeader.from_raw(raw, Version.V1)
    assert back.route == "/svc/m"
    assert back.headers == {"content-type": "json"}
    assert back.extensions == {}


def test_into_request_wraps_and_passes_through():
    wrapped = into_request(b"body")
    assert wrapped.body == b"body"
    existing = Request(b"x")
    assert into_request(existing) is existing