"""Rendering of log trails to the console and to files."""

from __future__ import annotations

from dataclasses import is_dataclass
from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from bucket.config import check_out_mode
from bucket.core.formatting import output_path, text_timestamp

from .entry import LogEntry
from .sink import current_logs


def format_entry(entry: LogEntry) -> str:
    """``<time> <LEVEL> <indent spaces><value>``"""
    return f"{text_timestamp(entry.time)} {entry.level.value.upper():<8} {' ' * entry.indent}{entry.value}"


def format_logs(sink: Any) -> list[str]:
    return [format_entry(e) for e in current_logs(sink)]


def to_stdout(sink: Any, *, console: Optional[Console] = None) -> Any:
    """Print every entry of the trail held by `sink`; returns `sink`."""
    console = console if console is not None else Console(highlight=False, soft_wrap=True)
    for line in format_logs(sink):
        console.print(line, markup=False)
    return sink


def _sink_name(sink: Any) -> Optional[str]:
    if is_dataclass(sink) and hasattr(sink, "name"):
        return sink.name
    if isinstance(sink, dict):
        return sink.get("name")
    return None


def to_file(
    sink: Any,
    *,
    dir: Optional[Path] = None,
    name: Optional[str] = None,
    timestamp: bool = True,
) -> Path:
    """
    Write the trail held by `sink` to a ``.log`` file and return its path.

    The directory defaults to ``out/<bucket-name>`` for named Buckets and
    ``logs`` otherwise.
    """
    if dir is None:
        bucket_name = _sink_name(sink)
        dir = Path("out") / bucket_name if bucket_name else Path("logs")
    path = output_path(Path(dir), name, timestamp=timestamp, kind="logs", ext="log")
    path.write_text("\n".join(format_logs(sink)), encoding="utf-8")
    return path


def print_logs(
    sink: Any,
    *,
    out: str = "both",
    dir: Optional[Path] = None,
    name: Optional[str] = None,
    timestamp: bool = True,
) -> Optional[Path]:
    """Print logs according to `out` ("none", "stdout", "file", "both")."""
    check_out_mode(out)
    path = None
    if out in ("stdout", "both"):
        to_stdout(sink)
    if out in ("file", "both"):
        path = to_file(sink, dir=dir, name=name, timestamp=timestamp)
    return path
