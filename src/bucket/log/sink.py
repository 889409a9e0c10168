"""Read/replace access to the log trail of the shapes that carry one."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import is_dataclass, replace
from typing import Any, Iterable

from .entry import LogEntry, LogTrail, ensure_logs


def _is_carrier(sink: Any) -> bool:
    return is_dataclass(sink) and not isinstance(sink, type) and hasattr(sink, "logs")


def is_log_carrier(sink: Any) -> bool:
    """True for shapes that hold a trail under a ``logs`` slot (mappings, Buckets)."""
    return _is_carrier(sink) or isinstance(sink, Mapping)


def current_logs(sink: Any) -> LogTrail:
    """Return the trail held by `sink` (a trail, mapping, Bucket or None)."""
    if _is_carrier(sink):
        return ensure_logs(sink.logs)
    if isinstance(sink, Mapping):
        return ensure_logs(sink.get("logs"))
    return ensure_logs(sink)


def has_own_logs(sink: Any) -> bool:
    """
    Whether a result carries a trail of its own.

    Mappings need a non-None ``"logs"`` value; Buckets a non-empty trail.
    """
    if _is_carrier(sink):
        return bool(sink.logs)
    if isinstance(sink, Mapping):
        return sink.get("logs") is not None
    return False


def with_logs(sink: Any, logs: Iterable[LogEntry]) -> Any:
    """Return `sink` with its trail replaced; bare trails and None become the trail."""
    trail = ensure_logs(logs)
    if _is_carrier(sink):
        return replace(sink, logs=trail)
    if isinstance(sink, Mapping):
        updated = dict(sink)
        updated["logs"] = trail
        return updated
    return trail
