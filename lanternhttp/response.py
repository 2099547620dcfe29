"""An HTTP response and its serialisation to the wire."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Mapping

from .status import HttpStatus, is_informational, status_message

__all__ = ["HttpResponse"]


def _coerce_status(code: int) -> int:
    try:
        return HttpStatus(int(code))
    except ValueError:
        return int(code)


@dataclass
class HttpResponse:
    """A response: status, body and headers.

    The body may be text or bytes; text is sent as UTF-8. Headers are written
    in sorted order of name.
    """

    status: int = HttpStatus.OK
    content: str | bytes = ""
    content_type: InitVar[str] = "text/html"
    headers: dict[str, str] = field(default_factory=dict, init=False)

    def __post_init__(self, content_type: str) -> None:
        self.status = _coerce_status(self.status)
        self.set_header("Content-Type", content_type)
        self.set_header("Content-Length", str(len(self._payload())))

    @classmethod
    def create(
        cls, status_code: int, content: str | bytes, headers: Mapping[str, str]
    ) -> "HttpResponse":
        """Build a response from a numeric code, a body and extra headers."""
        response = cls(status_code, content)
        response.headers.update(headers)
        return response

    def _payload(self) -> bytes:
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return bytes(self.content)

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def header(self, name: str) -> str:
        """Return a header's value, or "" when it is absent."""
        return self.headers.get(name, "")

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def remove_header(self, name: str) -> None:
        self.headers.pop(name, None)

    def set_body(self, body: str | bytes) -> None:
        """Replace the body and keep Content-Length in step with it."""
        self.content = body
        self.set_header("Content-Length", str(len(self._payload())))

    def should_compress(self) -> bool:
        """True when the response carries a body that may be re-encoded."""
        if not self.content:
            return False
        if is_informational(self.status):
            return False
        return int(self.status) not in (HttpStatus.NO_CONTENT, HttpStatus.NOT_MODIFIED)

    def _status_line(self) -> str:
        return f"HTTP/1.1 {int(self.status)} {status_message(self.status)}\r\n"

    def _header_lines(self, skip: tuple[str, ...] = ()) -> str:
        return "".join(
            f"{name}: {value}\r\n"
            for name, value in sorted(self.headers.items())
            if name not in skip
        )

    def build(self) -> bytes:
        """Serialise with a plain body."""
        head = self._status_line() + self._header_lines() + "\r\n"
        return head.encode("utf-8") + self._payload()

    def build_chunked(self) -> bytes:
        """Serialise with chunked transfer coding: one chunk, then the last chunk."""
        payload = self._payload()
        head = (
            self._status_line()
            + self._header_lines(skip=("Content-Length",))
            + "Transfer-Encoding: chunked\r\n\r\n"
        )
        return (
            head.encode("utf-8")
            + f"{len(payload):x}\r\n".encode("ascii")
            + payload
            + b"\r\n0\r\n\r\n"
        )