"""Compresses response bodies for clients that accept it."""

from __future__ import annotations

from typing import Sequence

from .compression import CompressionError, CompressionPolicy, compress
from .request import HttpRequest
from .response import HttpResponse

__all__ = ["apply_compression", "choose_compression_algorithm", "compress_response"]


def _body_bytes(response: HttpResponse) -> bytes:
    content = response.content
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


def apply_compression(
    request: HttpRequest,
    response: HttpResponse,
    policy: CompressionPolicy | None = None,
) -> bool:
    """Compress the response in place when policy and client allow it.

    Returns True when the body was replaced by a compressed one.
    """
    if not response.content or response.has_header("Content-Encoding") or not response.should_compress():
        return False

    config = (policy or CompressionPolicy()).config_for_content_type(response.header("Content-Type"))
    if not config.enabled or len(_body_bytes(response)) < config.min_size_to_compress:
        return False

    accept_encoding = request.header("Accept-Encoding")
    if not accept_encoding:
        return False

    algorithm = choose_compression_algorithm(accept_encoding, config.preferred_algorithms)
    if not algorithm:
        return False

    return compress_response(response, algorithm)


def choose_compression_algorithm(accept_encoding: str, preferred_algorithms: Sequence[str]) -> str:
    """Pick the first preferred coding the client mentions, else gzip or deflate, else ""."""
    accepted = accept_encoding.lower()
    for encoding in preferred_algorithms:
        candidate = encoding.lower()
        if candidate in accepted:
            return candidate
    for fallback in ("gzip", "deflate"):
        if fallback in accepted:
            return fallback
    return ""


def compress_response(response: HttpResponse, algorithm: str) -> bool:
    """Compress the body with the named coding; unknown codings leave it as it is."""
    if algorithm not in ("gzip", "deflate"):
        return False
    try:
        compressed = compress(_body_bytes(response))
    except CompressionError:
        response.remove_header("Content-Encoding")
        return False
    if not compressed:
        return False
    response.set_body(compressed)
    response.set_header("Content-Encoding", algorithm)
    response.set_header("Vary", "Accept-Encoding")
    return True