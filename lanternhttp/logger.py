"""A thread-safe logger writing timestamped lines to a stream and a file."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import IntEnum
from os import PathLike
from typing import TextIO

__all__ = ["Level", "Logger", "get_logger"]


class Level(IntEnum):
    """Severity of a log message, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


class Logger:
    """Writes "[timestamp] [LEVEL] message" lines.

    Lines go to ``stream`` (standard output when it is None) while
    ``console_output`` is true, and to a file once one is opened.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        min_level: Level = Level.INFO,
        console_output: bool = True,
    ) -> None:
        self.stream = stream
        self.min_level = min_level
        self.console_output = console_output
        self._file: TextIO | None = None
        self._lock = threading.Lock()

    def open_file(self, filename: str | PathLike[str]) -> None:
        """Also append every line to the named file."""
        handle = open(filename, "a", encoding="utf-8")
        with self._lock:
            if self._file is not None:
                self._file.close()
            self._file = handle

    def close_file(self) -> None:
        """Stop writing to the log file, if one is open."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def log(self, level: Level, message: str) -> None:
        """Write a message if its level is at least the minimum level."""
        if level < self.min_level:
            return
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        line = f"[{timestamp}] [{Level(level).name}] {message}\n"
        with self._lock:
            if self.console_output:
                target = self.stream if self.stream is not None else sys.stdout
                target.write(line)
                target.flush()
            if self._file is not None:
                self._file.write(line)
                self._file.flush()

    def trace(self, message: str) -> None:
        self.log(Level.TRACE, message)

    def debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Level.INFO, message)

    def warning(self, message: str) -> None:
        self.log(Level.WARNING, message)

    def error(self, message: str) -> None:
        self.log(Level.ERROR, message)

    def fatal(self, message: str) -> None:
        self.log(Level.FATAL, message)


_shared_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _shared_logger