"""Parsing of plain ``http://`` URLs into host, port, path and search part."""

from __future__ import annotations

from dataclasses import dataclass, replace

_SCHEME = "http://"
_DEFAULT_PORT = "80"


class UrlError(ValueError):
    """Raised when a URL cannot be parsed."""


def _strip_scheme(url: str) -> str:
    while url.startswith(_SCHEME):
        url = url[len(_SCHEME):]
    return url


@dataclass
class Url:
    """A URL and the parts extracted from it by :meth:`parse`."""

    url: str
    host: str = ""
    port: str = ""
    path: str = ""
    searchpart: str = ""

    def is_http(self) -> bool:
        """Return True if the URL uses the ``http://`` scheme."""
        return _SCHEME in self.url

    def parse(self) -> Url:
        """Fill in the URL's parts and return a copy of the parsed URL."""
        if not self.is_http():
            raise UrlError("Only HTTP scheme is supported.")

        authority, _, rest = _strip_scheme(self.url).partition("/")
        has_path = "/" in _strip_scheme(self.url)

        host, colon, port = authority.partition(":")
        self.host = host
        self.port = port if colon else _DEFAULT_PORT

        if has_path:
            path, _, search = rest.partition("?")
            self.path = path
            self.searchpart = search
        else:
            self.path = ""
            self.searchpart = ""

        return replace(self)