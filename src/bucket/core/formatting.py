"""Timestamp and file-name formatting shared by the printers."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional


def filename_timestamp(now: Optional[datetime] = None) -> str:
    """Local time as ``yyMMddHHmmssSSS``."""
    now = now if now is not None else datetime.now()
    return now.strftime("%y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"


def text_timestamp(moment: datetime) -> str:
    """Human-readable local time, e.g. ``Mon Jan 15 10:30:00 2024``."""
    return moment.astimezone().strftime("%a %b %d %H:%M:%S %Y")


def make_filename(name: Optional[str], *, timestamp: bool, kind: str, ext: str) -> str:
    """
    Build an output file name.

    - name and timestamp: ``<ts>-<name>.<ext>``
    - timestamp only:     ``<ts>.<ext>``
    - name only:          ``<name>.<ext>``
    - neither:            ``<kind>.<ext>``
    """
    ts = filename_timestamp() if timestamp else None
    if ts and name:
        return f"{ts}-{name}.{ext}"
    if ts:
        return f"{ts}.{ext}"
    if name:
        return f"{name}.{ext}"
    return f"{kind}.{ext}"


def output_path(directory: Path, name: Optional[str], *, timestamp: bool, kind: str, ext: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    return directory / make_filename(name, timestamp=timestamp, kind=kind, ext=ext)
