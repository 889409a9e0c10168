"""Filtering of log trails by level, indentation, time or message."""

from __future__ import annotations

from datetime import datetime, timezone
import re
from typing import Any, Callable, Optional

from bucket.config import ConfigError

from .entry import Level, LogEntry, LogTrail
from .sink import current_logs, with_logs

_COMPARE: dict[str, Callable[[Any, Any], bool]] = {
    "lte": lambda a, b: a <= b,
    "gte": lambda a, b: a >= b,
    "eq": lambda a, b: a == b,
}

_DEFAULTS: dict[str, tuple[str, Any]] = {
    "level": ("lte", Level.DEBUG),
    "indent": ("lte", 4),
    "time": ("lte", None),
    "value": ("eq", r"(?i)error"),
}


def _to_millis(t: Any) -> Optional[int]:
    if isinstance(t, datetime):
        if t.tzinfo is None:
            t = t.replace(tzinfo=timezone.utc)
        return int(t.timestamp() * 1000)
    if isinstance(t, (int, float)):
        return int(t)
    return None


def _comparison(op: str) -> Callable[[Any, Any], bool]:
    compare = _COMPARE.get(op)
    if compare is None:
        raise ConfigError(f"Unsupported filter op: {op!r}")
    return compare


def by_level(logs: LogTrail, op: str, value: Any) -> LogTrail:
    compare = _comparison(op)
    target = Level.parse(value).rank
    return tuple(e for e in logs if compare(e.level.rank, target))


def by_indent(logs: LogTrail, op: str, value: Any) -> LogTrail:
    compare = _comparison(op)
    target = value if isinstance(value, int) else 0
    return tuple(e for e in logs if compare(e.indent, target))


def by_time(logs: LogTrail, op: str, value: Any) -> LogTrail:
    compare = _comparison(op)
    target = _to_millis(value)
    if target is None:
        target = _to_millis(datetime.now(timezone.utc))
    return tuple(e for e in logs if compare(_to_millis(e.time), target))


def by_value(logs: LogTrail, op: str, value: Any) -> LogTrail:
    if op not in ("eq", "neq"):
        raise ConfigError(f"Unsupported filter op for value mode: {op!r}")
    pattern = value if isinstance(value, re.Pattern) else re.compile(str(value))

    def _matches(entry: LogEntry) -> bool:
        return entry.value is not None and pattern.search(str(entry.value)) is not None

    return tuple(e for e in logs if _matches(e) == (op == "eq"))


_MODES = {"level": by_level, "indent": by_indent, "time": by_time, "value": by_value}


def filter_logs(sink: Any, *, mode: str = "level", op: Optional[str] = None, value: Any = None) -> Any:
    """
    Filter the trail of `sink` and return the sink with the filtered trail.

    Modes and their defaults:
    - "level"  (op lte|gte|eq, default lte debug)
    - "indent" (op lte|gte|eq, default lte 4)
    - "time"   (op lte|gte|eq, default lte now); datetime or epoch millis
    - "value"  (op eq|neq, default eq ``(?i)error``); regex on the message

    Usage example
    -------------
        warnings_and_up = filter_logs(bucket, mode="level", op="gte", value="warning")
    """
    fn = _MODES.get(mode)
    if fn is None:
        raise ConfigError(f"Unsupported filter mode: {mode!r}")
    default_op, default_value = _DEFAULTS[mode]
    filtered = fn(current_logs(sink), op or default_op, default_value if value is None else value)
    return with_logs(sink, filtered)
