"""Centralized logging helpers.

``configure_logging`` installs a single stream handler on the root logger,
honoring ``FXDEPS_LOG_LEVEL`` and ``FXDEPS_LOG_FORMAT``. The remaining helpers
build structured ``extra`` payloads for debug traces.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from fxdeps.constants import Constants

_HANDLER_NAME = "fxdeps-console"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    level_name = (level or os.environ.get("FXDEPS_LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level_value)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(os.environ.get("FXDEPS_LOG_FORMAT", Constants.LOG_FORMAT))
    )
    root.addHandler(handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build a logging ``extra`` mapping, dropping None values.

    Keys are prefixed to avoid clashing with LogRecord attributes.
    """
    return {f"ctx_{key}": value for key, value in fields.items() if value is not None}


def safe_url(url: str) -> str:
    """Strip query string, fragment and credentials from a URL for logging."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<invalid-url>"
    netloc = parts.hostname or ""
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000.0, 2)
