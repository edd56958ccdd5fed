import pytest

from saba.errors import NetworkError
from saba.http import Header, parse_response


def test_invalid():
    with pytest.raises(NetworkError):
        parse_response("HTTP/1.1 200 OK")


def test_status_line_only():
    res = parse_response("HTTP/1.1 200 OK\n\n")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"


def test_one_header():
    res = parse_response("HTTP/1.1 200 OK\nDate:xx xx xx\n\n")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"
    assert res.header_value("Date") == "xx xx xx"


def test_two_headers_with_white_space():
    res = parse_response("HTTP/1.1 200 OK\nDate: xx xx xx\nContent-Length: 42\n\n")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"
    assert res.header_value("Date") == "xx xx xx"
    assert res.header_value("Content-Length") == "42"


def test_body():
    res = parse_response("HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"
    assert res.header_value("Date") == "xx xx xx"
    assert res.body == "body message"


def test_crlf_and_leading_whitespace():
    res = parse_response("  \r\nHTTP/1.1 302 Found\r\nLocation: http://example.com/\r\n\r\n")
    assert res.status_code == 302
    assert res.header_value("Location") == "http://example.com/"
    assert res.headers == [Header("Location", "http://example.com/")]


def test_missing_header_raises_key_error():
    res = parse_response("HTTP/1.1 200 OK\nDate: xx\n\n")
    with pytest.raises(KeyError):
        res.header_value("Location")


def test_unparsable_status_code_becomes_404():
    res = parse_response("HTTP/1.1 abc OK\n\n")
    assert res.status_code == 404