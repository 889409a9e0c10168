"""Printing of bucket metadata as YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from rich.console import Console

from bucket.config import check_out_mode
from bucket.core.formatting import output_path
from bucket.core.plain import to_plain


def render_meta(meta: Optional[Mapping[str, Any]]) -> str:
    return yaml.safe_dump(to_plain(meta or {}), sort_keys=True, default_flow_style=False).rstrip("\n")


def print_meta(
    meta: Optional[Mapping[str, Any]],
    *,
    out: str = "both",
    dir: Optional[Path] = None,
    name: Optional[str] = None,
    timestamp: bool = True,
) -> Optional[Path]:
    """
    Print metadata according to `out` ("none", "stdout", "file", "both").

    Files go to ``<dir>/<file>.yaml``; dir defaults to ``meta``.
    """
    check_out_mode(out)
    text = render_meta(meta)
    path = None
    if out in ("stdout", "both"):
        Console(highlight=False, soft_wrap=True).print(text, markup=False)
    if out in ("file", "both"):
        path = output_path(Path(dir) if dir is not None else Path("meta"), name, timestamp=timestamp, kind="meta", ext="yaml")
        path.write_text(text + "\n", encoding="utf-8")
    return path
