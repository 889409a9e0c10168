"""Log entries and the append operation over immutable log trails."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple

from .secret import redact


class Level(str, Enum):
    """Severity of a log entry."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    @classmethod
    def parse(cls, value: "Level | str") -> "Level":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text == "warn":
            text = "warning"
        return cls(text)


_LEVEL_RANK = {Level.DEBUG: 0, Level.INFO: 1, Level.WARNING: 2, Level.ERROR: 3, Level.CRITICAL: 4}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogEntry:
    """
    One entry of a log trail.

    Parameters
    ----------
    indent
        Indentation level of this entry.
    time
        UTC timestamp of when the entry was made.
    level
        Severity.
    value
        Message or structured data.
    indent_next
        When set, the indentation the next appended entry defaults to.
        Used by exit entries to restore the level active before a nested call.
    """
    indent: int
    time: datetime
    level: Level
    value: Any
    indent_next: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "indent": self.indent,
            "time": self.time.isoformat(),
            "level": self.level.value,
            "value": self.value,
        }
        if self.indent_next is not None:
            data["indent_next"] = self.indent_next
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogEntry":
        raw_time = data.get("time")
        if isinstance(raw_time, datetime):
            moment = raw_time
        elif isinstance(raw_time, (int, float)):
            moment = datetime.fromtimestamp(raw_time / 1000.0, tz=timezone.utc)
        elif raw_time:
            moment = datetime.fromisoformat(str(raw_time))
        else:
            moment = _utc_now()
        return cls(
            indent=int(data.get("indent", 0)),
            time=moment,
            level=Level.parse(data.get("level", Level.INFO)),
            value=data.get("value"),
            indent_next=data.get("indent_next"),
        )


LogTrail = Tuple[LogEntry, ...]


def ensure_logs(logs: Optional[Iterable[LogEntry]]) -> LogTrail:
    """Coerce a log collection into a trail tuple; None becomes empty."""
    if logs is None:
        return ()
    if isinstance(logs, tuple):
        return logs
    if isinstance(logs, (str, bytes, Mapping)) or not isinstance(logs, Iterable):
        return ()
    return tuple(logs)


def next_indent(logs: LogTrail) -> int:
    """Indentation the next entry defaults to: last ``indent_next``, else last ``indent``, else 0."""
    if not logs:
        return 0
    last = logs[-1]
    return last.indent_next if last.indent_next is not None else last.indent


def make_entry(
    value: Any,
    *,
    level: "Level | str" = Level.INFO,
    indent: int = 0,
    indent_next: Optional[int] = None,
) -> LogEntry:
    return LogEntry(indent=indent, time=_utc_now(), level=Level.parse(level), value=value, indent_next=indent_next)


def append(
    logs: Optional[Iterable[LogEntry]],
    message: Any,
    *,
    level: "Level | str" = Level.INFO,
    indent: Optional[int] = None,
    indent_next: Optional[int] = None,
    check_secrets: bool = False,
) -> LogTrail:
    """
    Return a new trail with one entry appended.

    `indent` defaults to ``next_indent(logs)``. With `check_secrets` the
    message is redacted before it is recorded.

    Usage example
    -------------
        logs = append((), "loading", level="debug")
        logs = append(logs, {"user": "ann", "password": "x"}, check_secrets=True)
    """
    trail = ensure_logs(logs)
    actual_indent = next_indent(trail) if indent is None else indent
    value = redact(message) if check_secrets else message
    return trail + (make_entry(value, level=level, indent=actual_indent, indent_next=indent_next),)
