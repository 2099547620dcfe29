"""Server configuration held as a JSON document."""

from __future__ import annotations

import json
from os import PathLike
from typing import Any

__all__ = ["ConfigError", "Config"]


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or updated."""


class Config:
    """Configuration values read from a JSON object.

    Plain keys address the top level; dotted paths such as "server.port"
    address nested objects.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data) if data else {}

    def load_from_file(self, file_path: str | PathLike[str]) -> None:
        """Replace the configuration with the JSON object stored in a file."""
        try:
            with open(file_path, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise ConfigError(f"cannot read configuration {file_path!s}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in {file_path!s}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"configuration in {file_path!s} is not a JSON object")
        self._data = data

    def get(self, key: str, default: Any = None) -> Any:
        """Return a top-level value, or the default when it is absent."""
        return self._data.get(key, default)

    def get_nested(self, path: str, default: Any = None) -> Any:
        """Return the value at a dotted path, or the default when the path is missing."""
        node: Any = self._data
        for part in path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """Set a top-level value."""
        self._data[key] = value

    def set_nested(self, path: str, value: Any) -> None:
        """Set the value at a dotted path, creating intermediate objects."""
        *parents, leaf = path.split(".")
        node = self._data
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ConfigError(f"cannot set {path!r}: {part!r} is not an object")
            node = child
        node[leaf] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data