import pytest

from peerwire.model import Version
from peerwire.peer_id import PeerId
from peerwire.response import (
    InvalidStatusCodeError,
    Response,
    ResponseHeader,
    StatusCode,
    into_response,
)

ALL_CODES = [
    StatusCode.SUCCESS,
    StatusCode.BAD_REQUEST,
    StatusCode.NOT_FOUND,
    StatusCode.TOO_MANY_REQUESTS,
    StatusCode.REQUEST_TIMEOUT,
    StatusCode.INTERNAL_SERVER_ERROR,
    StatusCode.VERSION_NOT_SUPPORTED,
    StatusCode.UNKNOWN,
]


@pytest.mark.parametrize("code", ALL_CODES)
def test_all_status_code_variants_are_returned_from_new(code):
    assert StatusCode.new(code.to_u16()) is code


def test_all_variants_covered():
    round_tripped = {StatusCode.new(code.to_u16()) for code in StatusCode}
    assert round_tripped == set(ALL_CODES)


def test_invalid_status_code():
    with pytest.raises(InvalidStatusCodeError) as info:
        StatusCode.new(201)
    assert info.value.code == 201
    assert str(info.value) == "invalid StatusCode 201"


@pytest.mark.parametrize(
    "code,text",
    [
        (StatusCode.SUCCESS, "200 Success"),
        (StatusCode.BAD_REQUEST, "400 Bad Request"),
        (StatusCode.NOT_FOUND, "404 Not Found"),
        (StatusCode.REQUEST_TIMEOUT, "408 Request Timeout"),
        (StatusCode.TOO_MANY_REQUESTS, "429 Too Many Requests"),
        (StatusCode.INTERNAL_SERVER_ERROR, "500 Internal Server Error"),
        (StatusCode.VERSION_NOT_SUPPORTED, "505 Version Not Supported"),
        (StatusCode.UNKNOWN, "520 Unknown"),
    ],
)
def test_status_display(code, text):
    assert str(code) == text


def test_status_classes():
    assert StatusCode.SUCCESS.is_success()
    assert not StatusCode.NOT_FOUND.is_success()
    assert StatusCode.NOT_FOUND.is_client_error()
    assert not StatusCode.UNKNOWN.is_client_error()
    assert StatusCode.UNKNOWN.is_server_error()
    assert not StatusCode.BAD_REQUEST.is_server_error()


def test_default_response_is_success():
    response = Response(b"x")
    assert response.status is StatusCode.SUCCESS
    assert response.version == Version.V1
    assert Response.empty().body == b""


def test_builders():
    response = (
        Response(b"").with_status(StatusCode.NOT_FOUND).with_header("k", "v")
    )
    assert response.status is StatusCode.NOT_FOUND
    assert response.headers == {"k": "v"}


def test_peer_id_extension():
    peer_id = PeerId(bytes(range(32)))
    assert Response(b"").with_extension(peer_id).peer_id() == peer_id
    assert Response(b"").peer_id() is None


def test_map_and_parts():
    response = Response(b"abc").with_status(StatusCode.BAD_REQUEST)
    mapped = response.map(len)
    assert mapped.body == 3
    assert mapped.status is StatusCode.BAD_REQUEST
    head, body = Response.from_parts(ResponseHeader(), "b").into_parts()
    assert body == "b"
    assert head.status is StatusCode.SUCCESS


def test_raw_round_trip():
    header = ResponseHeader(status=StatusCode.NOT_FOUND, headers={"a": "b"})
    header.extensions[str] = "ext"
    raw, extensions = header.to_raw()
    assert raw == {"status": 404, "headers": {"a": "b"}}
    assert extensions == {str: "ext"}
    back = ResponseHeader.from_raw(raw, Version.V1)
    assert back.status is StatusCode.NOT_FOUND
    assert back.headers == {"a": "b"}


def test_from_raw_invalid_status():
    with pytest.raises(InvalidStatusCodeError):
        ResponseHeader.from_raw({"status": 999, "headers": {}}, Version.V1)


def test_into_response_status_code():
    response = into_response(StatusCode.INTERNAL_SERVER_ERROR)
    assert response.status is StatusCode.INTERNAL_SERVER_ERROR
    assert response.body == b""


def test_into_response_none():
    response = into_response(None)
    assert response.status is StatusCode.SUCCESS
    assert response.body == b""


def test_into_response_rejects_other():
    with pytest.raises(TypeError):
        into_response(42.5)