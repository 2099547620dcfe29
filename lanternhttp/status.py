"""HTTP status codes, their reason phrases and their classes."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "HttpStatus",
    "status_message",
    "is_informational",
    "is_successful",
    "is_redirection",
    "is_client_error",
    "is_server_error",
]


class HttpStatus(IntEnum):
    """The status codes the server knows by name."""

    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    PARTIAL_CONTENT = 206

    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    UPGRADE_REQUIRED = 426
    TOO_MANY_REQUESTS = 429

    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505


_UNKNOWN_STATUS = "Unknown Status"

_MESSAGES: dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "No Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    426: "Upgrade Required",
    429: "Too Many Requests",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
}


def status_message(status: int) -> str:
    """Return the reason phrase for a status, or "Unknown Status"."""
    return _MESSAGES.get(int(status), _UNKNOWN_STATUS)


def is_informational(status: int) -> bool:
    """True for 1xx codes."""
    return 100 <= int(status) < 200


def is_successful(status: int) -> bool:
    """True for 2xx codes."""
    return 200 <= int(status) < 300


def is_redirection(status: int) -> bool:
    """True for 3xx codes."""
    return 300 <= int(status) < 400


def is_client_error(status: int) -> bool:
    """True for 4xx codes."""
    return 400 <= int(status) < 500


def is_server_error(status: int) -> bool:
    """True for 5xx codes."""
    return 500 <= int(status) < 600