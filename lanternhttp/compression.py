"""Body compression and the per-content-type policy that governs it."""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field

__all__ = [
    "CompressionError",
    "CompressionConfig",
    "CompressionPolicy",
    "compress",
    "decompress",
    "decompress_to_string",
]


class CompressionError(Exception):
    """Raised when data cannot be compressed or decompressed."""


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def compress(data: bytes | bytearray | str) -> bytes:
    """Compress data into a zlib stream at the default level."""
    try:
        return zlib.compress(_as_bytes(data), zlib.Z_DEFAULT_COMPRESSION)
    except zlib.error as exc:
        raise CompressionError(f"compression failed: {exc}") from exc


def decompress(data: bytes | bytearray) -> bytes:
    """Inflate a zlib stream."""
    try:
        return zlib.decompress(bytes(data))
    except zlib.error as exc:
        raise CompressionError(f"decompression failed: {exc}") from exc


def decompress_to_string(data: bytes | bytearray) -> str:
    """Inflate a zlib stream holding UTF-8 text."""
    raw = decompress(data)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CompressionError(f"decompressed data is not UTF-8: {exc}") from exc


@dataclass(frozen=True)
class CompressionConfig:
    """Whether to compress, from what size on, and which codings to prefer."""

    enabled: bool = True
    min_size_to_compress: int = 1024
    preferred_algorithms: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferred_algorithms", tuple(self.preferred_algorithms))


class CompressionPolicy:
    """Compression settings by content type, with "type/*" wildcards and a default."""

    def __init__(self, default: CompressionConfig | None = None) -> None:
        self._default = default or CompressionConfig(preferred_algorithms=("gzip", "deflate"))
        self._by_content_type: dict[str, CompressionConfig] = {}

    def set_default_config(self, config: CompressionConfig) -> None:
        self._default = config

    def set_content_type_config(self, content_type: str, config: CompressionConfig) -> None:
        self._by_content_type[content_type] = config

    def config_for_content_type(self, content_type: str) -> CompressionConfig:
        """Exact match first, then "main/*", then the default."""
        exact = self._by_content_type.get(content_type)
        if exact is not None:
            return exact
        main, slash, _ = content_type.partition("/")
        if slash:
            wildcard = self._by_content_type.get(f"{main}/*")
            if wildcard is not None:
                return wildcard
        return self._default