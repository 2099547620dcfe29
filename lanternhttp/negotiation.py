"""Server-driven content negotiation over Accept-* request headers."""

from __future__ import annotations

import re
from typing import Sequence

from .request import HttpRequest
from .response import HttpResponse

__all__ = [
    "NegotiationError",
    "negotiate",
    "parse_quality_values",
    "negotiate_content_type",
    "negotiate_language",
    "negotiate_encoding",
    "negotiate_charset",
]

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class NegotiationError(Exception):
    """Raised when there is nothing to negotiate between."""


def parse_quality_values(header_value: str) -> list[tuple[str, float]]:
    """Split a header such as "text/html;q=0.5, */*" into (value, q) pairs.

    Whitespace is removed, a missing or unreadable q counts as 1.0, and the
    pairs come back ordered from the highest q down, ties keeping their order.
    """
    items = header_value.split(",")
    if items and items[-1] == "":
        items.pop()

    result: list[tuple[str, float]] = []
    for raw in items:
        item = "".join(raw.split())
        value, sep, param = item.partition(";")
        quality = 1.0
        if sep and param.startswith("q="):
            match = _FLOAT_PREFIX.match(param[2:])
            if match is not None:
                quality = float(match.group())
        result.append((value, quality))

    return sorted(result, key=lambda pair: -pair[1])


def _accepted(header: str) -> list[str]:
    return [value for value, quality in parse_quality_values(header) if quality != 0]


def _split_media_type(media_type: str) -> tuple[str, str] | None:
    main, sep, sub = media_type.partition("/")
    return (main, sub) if sep else None


def negotiate_content_type(accept_header: str, available_types: Sequence[str]) -> str:
    """Pick the media type the client prefers, or "" when none is acceptable."""
    if not accept_header or not available_types:
        return ""
    for wanted in _accepted(accept_header):
        for available in available_types:
            if wanted == "*/*":
                return available
            wanted_parts = _split_media_type(wanted)
            if wanted_parts is None:
                continue
            available_parts = _split_media_type(available)
            if available_parts is None:
                continue
            if wanted_parts[1] == "*" and wanted_parts[0] == available_parts[0]:
                return available
            if wanted == available:
                return available
    return ""


def negotiate_language(accept_language_header: str, available_langs: Sequence[str]) -> str:
    """Pick the language the client prefers; "en-US" also accepts "en..."."""
    if not accept_language_header or not available_langs:
        return ""
    for wanted in _accepted(accept_language_header):
        for available in available_langs:
            if wanted == "*" or wanted == available:
                return available
            main_tag, dash, _ = wanted.partition("-")
            if dash and available.startswith(main_tag):
                return available
    return ""


def _negotiate_token(header: str, available: Sequence[str]) -> str:
    if not header or not available:
        return ""
    for wanted in _accepted(header):
        for candidate in available:
            if wanted == "*" or wanted == candidate:
                return candidate
    return ""


def negotiate_encoding(accept_encoding_header: str, available_encodings: Sequence[str]) -> str:
    """Pick the content coding the client prefers, or ""."""
    return _negotiate_token(accept_encoding_header, available_encodings)


def negotiate_charset(accept_charset_header: str, available_charsets: Sequence[str]) -> str:
    """Pick the charset the client prefers, or ""."""
    return _negotiate_token(accept_charset_header, available_charsets)


def _optional_headers(responses: Sequence[HttpResponse], name: str) -> list[str]:
    return [r.header(name) for r in responses if r.has_header(name)]


def _matches(response: HttpResponse, name: str, best: str) -> bool:
    return not best or (response.has_header(name) and response.header(name) == best)


def negotiate(
    request: HttpRequest, possible_responses: Sequence[HttpResponse]
) -> HttpResponse:
    """Return the representation that best fits the request's Accept-* headers.

    When no representation fits every preference the first one is returned.
    Raises NegotiationError when there are no representations at all.
    """
    if not possible_responses:
        raise NegotiationError("No possible responses provided")
    if len(possible_responses) == 1:
        return possible_responses[0]

    available_types = [r.header("Content-Type") for r in possible_responses]
    best_type = negotiate_content_type(request.header("Accept"), available_types)
    best_lang = negotiate_language(
        request.header("Accept-Language"),
        _optional_headers(possible_responses, "Content-Language"),
    )
    best_encoding = negotiate_encoding(
        request.header("Accept-Encoding"),
        _optional_headers(possible_responses, "Content-Encoding"),
    )
    best_charset = negotiate_charset(
        request.header("Accept-Charset"),
        _optional_headers(possible_responses, "Content-Charset"),
    )

    for response in possible_responses:
        type_match = not best_type or response.header("Content-Type") == best_type
        if (
            type_match
            and _matches(response, "Content-Language", best_lang)
            and _matches(response, "Content-Encoding", best_encoding)
            and _matches(response, "Content-Charset", best_charset)
        ):
            return response

    return possible_responses[0]