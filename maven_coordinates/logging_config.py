"""Centralized logging configuration.

Guarantees:
- All logs go to stderr (stdout belongs to the stdio tool transport)
- Idempotent configuration (no duplicate handlers)
- Human-readable by default; one JSON object per line when requested
- MCP transport loggers stay at WARNING unless DEBUG is requested
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

_STDERR_HANDLER_NAME = "maven_coordinates_stderr"
_TRANSPORT_LOGGERS = ("mcp", "fastmcp")

# Attributes every LogRecord carries; anything else came in via extra=
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class _JsonFormatter(logging.Formatter):
    """One-line JSON with timestamp, level, logger and message plus extras."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name or "root",
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RECORD_ATTRS:
                continue
            try:
                json.dumps(value)
            except (TypeError, ValueError):
                value = str(value)
            payload[key] = value

        return json.dumps(payload, ensure_ascii=False)


def _build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return _JsonFormatter()
    # 2026-01-01T00:00:00+0000 INFO maven_coordinates.server Message
    return logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def _get_or_create_stderr_handler(root: logging.Logger, json_logs: bool) -> logging.Handler:
    for h in root.handlers:
        if h.name == _STDERR_HANDLER_NAME:
            h.setFormatter(_build_formatter(json_logs))
            return h

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.name = _STDERR_HANDLER_NAME
    handler.setFormatter(_build_formatter(json_logs))
    return handler


def _is_stdout_handler(h: logging.Handler) -> bool:
    return isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stdout


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure application-wide logging.

    Parameters
    ----------
    log_level: str
        Root log level name; unknown names fall back to INFO.
    json_logs: bool
        If True, emit one-line JSON per record.
    """

    level = logging.getLevelName((log_level or "").upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    handler = _get_or_create_stderr_handler(root, json_logs)
    if handler not in root.handlers:
        root.handlers = [h for h in root.handlers if not _is_stdout_handler(h)]
        root.addHandler(handler)
    root.setLevel(level)

    transport_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["configure_logging"]
