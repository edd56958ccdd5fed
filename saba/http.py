"""Parsing of raw HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass, field

from saba.errors import NetworkError

_NOT_FOUND = 404
_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Header:
    """A single response header."""

    name: str
    value: str


@dataclass
class HttpResponse:
    """A parsed HTTP response."""

    version: str
    status_code: int
    reason: str
    headers: list[Header] = field(default_factory=list)
    body: str = ""

    def header_value(self, name: str) -> str:
        """Return the value of the first header called ``name``.

        Raises KeyError if no such header exists.
        """
        for header in self.headers:
            if header.name == name:
                return header.value
        raise KeyError(f"failed to find {name} in headers")


def _parse_status_code(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        value = int(digits)
        if value <= _U32_MAX:
            return value
    return _NOT_FOUND


def _parse_header(line: str) -> Header:
    name, sep, value = line.partition(":")
    if not sep:
        raise NetworkError(f"invalid http header: {line}")
    return Header(name.strip(), value.strip())


def parse_response(raw_response: str) -> HttpResponse:
    """Parse a raw HTTP response into an HttpResponse.

    Raises NetworkError when the text is not a response.
    """
    text = raw_response.lstrip().replace("\r\n", "\n")

    status_line, sep, remaining = text.partition("\n")
    if not sep:
        raise NetworkError(f"invalid http response: {text}")

    head, sep, body = remaining.partition("\n\n")
    if sep:
        headers = [_parse_header(line) for line in head.split("\n")]
    else:
        headers, body = [], remaining

    statuses = status_line.split(" ")
    if len(statuses) < 3:
        raise NetworkError(f"invalid http status line: {status_line}")

    return HttpResponse(
        version=statuses[0],
        status_code=_parse_status_code(statuses[1]),
        reason=statuses[2],
        headers=headers,
        body=body,
    )