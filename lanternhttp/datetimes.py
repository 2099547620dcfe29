"""Reading and writing RFC 1123 dates as used in HTTP headers."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import formatdate

__all__ = ["parse_http_date", "format_http_date"]

_DAY_NAMES = {
    "mon": "monday",
    "tue": "tuesday",
    "wed": "wednesday",
    "thu": "thursday",
    "fri": "friday",
    "sat": "saturday",
    "sun": "sunday",
}

_MONTHS = {
    "jan": (1, "january"),
    "feb": (2, "february"),
    "mar": (3, "march"),
    "apr": (4, "april"),
    "may": (5, "may"),
    "jun": (6, "june"),
    "jul": (7, "july"),
    "aug": (8, "august"),
    "sep": (9, "september"),
    "oct": (10, "october"),
    "nov": (11, "november"),
    "dec": (12, "december"),
}

_PATTERN = re.compile(
    r"\s*([A-Za-z]+),\s*(\d{1,2})\s+([A-Za-z]+)\s+(\d{4})\s+"
    r"(\d{1,2}):(\d{1,2}):(\d{1,2})\s+GMT"
)


def _is_day_name(name: str) -> bool:
    name = name.lower()
    return name in _DAY_NAMES or name in _DAY_NAMES.values()


def _month_number(name: str) -> int | None:
    name = name.lower()
    for short, (number, full) in _MONTHS.items():
        if name in (short, full):
            return number
    return None


def parse_http_date(value: str) -> int:
    """Parse a date such as "Sun, 06 Nov 1994 08:49:37 GMT" to a Unix timestamp.

    Raises ValueError when the text is not such a date.
    """
    match = _PATTERN.match(value)
    if match is None:
        raise ValueError(f"not an HTTP date: {value!r}")
    day_name, day, month_name, year, hour, minute, second = match.groups()
    month = _month_number(month_name)
    if not _is_day_name(day_name) or month is None:
        raise ValueError(f"not an HTTP date: {value!r}")
    try:
        moment = datetime(
            int(year), month, int(day), int(hour), int(minute), int(second),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise ValueError(f"not an HTTP date: {value!r}") from exc
    return int(moment.timestamp())


def format_http_date(timestamp: float) -> str:
    """Format a Unix timestamp as an RFC 1123 date in GMT."""
    return formatdate(timestamp, usegmt=True)