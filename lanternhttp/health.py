"""A health-check endpoint reporting system load and component status."""

from __future__ import annotations

import json
import os
import shutil
import time

from .request import HttpRequest
from .response import HttpResponse
from .status import HttpStatus

__all__ = [
    "check_health",
    "cpu_usage",
    "memory_usage",
    "disk_usage",
    "check_database_connection",
    "check_cache_connection",
    "check_external_service",
]


def _percent(part: float, whole: float) -> float:
    if whole <= 0:
        return 0.0
    return max(0.0, min(100.0, part / whole * 100.0))


def cpu_usage() -> float:
    """One-minute load average as a percentage of the available CPUs."""
    try:
        load = os.getloadavg()[0]
    except (AttributeError, OSError):
        return 0.0
    return _percent(load, os.cpu_count() or 1)


def memory_usage() -> float:
    """Share of physical memory in use, as a percentage."""
    try:
        total = os.sysconf("SC_PHYS_PAGES")
        available = os.sysconf("SC_AVPHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        return 0.0
    return _percent(total - available, total)


def disk_usage() -> float:
    """Share of the root filesystem in use, as a percentage."""
    try:
        usage = shutil.disk_usage(os.path.abspath(os.sep))
    except OSError:
        return 0.0
    return _percent(usage.used, usage.total)


def check_database_connection() -> bool:
    """The server keeps no database connection, so there is none to be down."""
    return True


def check_cache_connection() -> bool:
    """The server keeps no external cache, so there is none to be down."""
    return True


def check_external_service() -> bool:
    """The server depends on no external service, so none can be down."""
    return True


def check_health(request: HttpRequest) -> HttpResponse:
    """Build a JSON health report."""
    report = {
        "status": "healthy",
        "timestamp": int(time.time()),
        "system": {
            "cpu": cpu_usage(),
            "memory": memory_usage(),
            "disk": disk_usage(),
        },
        "components": {
            "database": check_database_connection(),
            "cache": check_cache_connection(),
            "external_service": check_external_service(),
        },
    }
    body = json.dumps(report, separators=(",", ":"))
    return HttpResponse(HttpStatus.OK, body, "application/json")