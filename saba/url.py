"""Parsing of plain ``http://`` URLs."""

from __future__ import annotations

from dataclasses import dataclass

from saba.errors import UnexpectedInputError

_SCHEME = "http://"
_DEFAULT_PORT = "80"


def _strip_scheme(url: str) -> str:
    while url.startswith(_SCHEME):
        url = url[len(_SCHEME):]
    return url


@dataclass
class Url:
    """A URL split into host, port, path and search part."""

    url: str
    host: str = ""
    port: str = ""
    path: str = ""
    searchpart: str = ""

    def _parts(self) -> list[str]:
        return _strip_scheme(self.url).split("/", 1)

    def _path_and_searchpart(self) -> list[str]:
        parts = self._parts()
        if len(parts) < 2:
            return []
        return parts[1].split("?", 1)

    def parse(self) -> "Url":
        """Fill in the components from the raw URL and return this URL.

        Raises UnexpectedInputError for anything but the http scheme.
        """
        if _SCHEME not in self.url:
            raise UnexpectedInputError("Only HTTP scheme is supported.")

        authority = self._parts()[0]
        host, sep, port = authority.partition(":")
        self.host = host
        self.port = port if sep else _DEFAULT_PORT

        rest = self._path_and_searchpart()
        self.path = rest[0] if rest else ""
        self.searchpart = rest[1] if len(rest) > 1 else ""
        return self