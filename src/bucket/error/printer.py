"""Printing of error tuples and the exit policy applied when one is present."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from bucket.config import check_exit_mode, check_out_mode
from bucket.core.formatting import output_path

from .entry import error_message
from .sink import normalize_error


def error_report(error: Any) -> Optional[str]:
    """Multi-line description of an error tuple, or None when there is no error."""
    cause, stacktrace = normalize_error(error)
    if cause is None:
        return None
    lines = [
        f"error class: {type(cause).__name__}",
        f"error message: {error_message(cause)}",
    ]
    inner = getattr(cause, "__cause__", None)
    if inner is not None:
        lines.append(f"error cause: {type(inner).__name__}: {inner}")
    if stacktrace:
        lines.append("stacktrace:")
        lines.append(stacktrace.rstrip("\n"))
    return "\n".join(lines)


def to_stdout(error: Any, *, console: Optional[Console] = None) -> None:
    report = error_report(error)
    if report is None:
        return
    console = console if console is not None else Console(highlight=False, soft_wrap=True)
    console.print(report, markup=False)


def to_file(
    error: Any,
    *,
    dir: Optional[Path] = None,
    name: Optional[str] = None,
    timestamp: bool = True,
) -> Optional[Path]:
    """Write the error report to ``<dir>/<file>.log`` (dir defaults to ``errors``)."""
    report = error_report(error)
    if report is None:
        return None
    path = output_path(Path(dir) if dir is not None else Path("errors"), name, timestamp=timestamp, kind="error", ext="log")
    path.write_text(report + "\n", encoding="utf-8")
    return path


def handle_error(
    error: Any,
    *,
    out: str = "both",
    dir: Optional[Path] = None,
    name: Optional[str] = None,
    timestamp: bool = True,
    exit: str = "fail",
) -> Optional[Path]:
    """
    Report an error tuple and apply the exit policy.

    Behavior
    --------
    - out: "none" | "stdout" | "file" | "both" decides where the report goes.
    - exit: "success" raises SystemExit(0), "fail" raises SystemExit(1),
      "continue" returns the written file path (if any).

    Nothing happens when the tuple carries no cause.
    """
    check_out_mode(out)
    check_exit_mode(exit)
    cause, _ = normalize_error(error)
    if cause is None:
        return None

    path = None
    if out in ("stdout", "both"):
        to_stdout(error)
    if out in ("file", "both"):
        path = to_file(error, dir=dir, name=name, timestamp=timestamp)

    if exit == "success":
        raise SystemExit(0)
    if exit == "fail":
        raise SystemExit(1)
    return path
