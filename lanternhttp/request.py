"""An HTTP request and its conditional-request checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .datetimes import parse_http_date

__all__ = ["HttpRequest"]


def _etag_list_matches(header_value: str, etag: str) -> bool:
    if not header_value:
        return False
    if header_value == "*":
        return True
    return etag in header_value.split(",")


@dataclass
class HttpRequest:
    """A parsed HTTP request. The method is stored upper case."""

    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    query_params: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.method = self.method.upper()

    def header(self, name: str) -> str:
        """Return a header's value, or "" when it is absent."""
        return self.headers.get(name, "")

    def query_param(self, name: str) -> str:
        """Return a query parameter's value, or "" when it is absent."""
        return self.query_params.get(name, "")

    def _header_time(self, name: str) -> int | None:
        value = self.header(name)
        if not value:
            return None
        try:
            return parse_http_date(value)
        except ValueError:
            return None

    def check_if_modified_since(self, last_modified: int) -> bool:
        """True when If-Modified-Since is valid and the resource is not newer."""
        header_time = self._header_time("If-Modified-Since")
        return header_time is not None and last_modified <= header_time

    def check_if_unmodified_since(self, last_modified: int) -> bool:
        """True when If-Unmodified-Since is valid and the resource is newer."""
        header_time = self._header_time("If-Unmodified-Since")
        return header_time is not None and last_modified > header_time

    def check_if_none_match(self, etag: str) -> bool:
        """True when If-None-Match is "*" or lists the given ETag."""
        return _etag_list_matches(self.header("If-None-Match"), etag)

    def check_if_match(self, etag: str) -> bool:
        """True when If-Match is "*" or lists the given ETag."""
        return _etag_list_matches(self.header("If-Match"), etag)