"""
log subpackage: immutable log trails with indentation bookkeeping.

Log entry format: ``LogEntry(indent, time, level, value, indent_next)``.
Every function returns a new trail or sink; nothing is mutated in place.
"""

from __future__ import annotations

from typing import Any

from .entry import Level, LogEntry, LogTrail, append, ensure_logs, make_entry, next_indent
from .filter import filter_logs
from .printer import format_entry, print_logs
from .secret import REDACTED, likely_secret, redact
from .sink import current_logs, with_logs


def log(sink: Any, message: Any, **opts: Any) -> Any:
    """
    Append `message` to the trail held by `sink` and return the updated sink.

    `sink` may be a trail, a mapping with a ``"logs"`` key, a Bucket or None.
    Accepts the keyword options of ``append`` (level, indent, indent_next,
    check_secrets).

    Usage example
    -------------
        bucket = log(bucket, "fetched rows", level="debug")
    """
    return with_logs(sink, append(current_logs(sink), message, **opts))


def debug(sink: Any, message: Any, **opts: Any) -> Any:
    return log(sink, message, **{**opts, "level": Level.DEBUG})


def info(sink: Any, message: Any, **opts: Any) -> Any:
    return log(sink, message, **{**opts, "level": Level.INFO})


def warning(sink: Any, message: Any, **opts: Any) -> Any:
    return log(sink, message, **{**opts, "level": Level.WARNING})


def error(sink: Any, message: Any, **opts: Any) -> Any:
    return log(sink, message, **{**opts, "level": Level.ERROR})


def critical(sink: Any, message: Any, **opts: Any) -> Any:
    return log(sink, message, **{**opts, "level": Level.CRITICAL})


__all__ = [
    "Level",
    "LogEntry",
    "LogTrail",
    "REDACTED",
    "append",
    "critical",
    "current_logs",
    "debug",
    "ensure_logs",
    "error",
    "filter_logs",
    "format_entry",
    "info",
    "likely_secret",
    "log",
    "make_entry",
    "next_indent",
    "print_logs",
    "redact",
    "warning",
    "with_logs",
]
