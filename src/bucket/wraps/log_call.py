from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any, Callable, Optional

from bucket.config import DEFAULT_SPACING
from bucket.core.bucket import grab
from bucket.log.entry import Level, append
from bucket.log.sink import current_logs, has_own_logs, is_log_carrier, with_logs

Stage = Callable[[Mapping[str, Any]], Any]


def stage_name(f: Callable[..., Any]) -> str:
    """Declared name of `f`; lambdas and partials count as unnamed."""
    name = getattr(f, "__name__", "")
    return "" if name == "<lambda>" else name


def log_call(f: Stage, *, spacing: int = DEFAULT_SPACING, name: Optional[str] = None) -> Stage:
    """
    Wrap a stage with ``--> name`` / ``<-- name`` entries one level deeper.

    The entry line sits at ``base + spacing`` where base is the indent of the
    last incoming entry, and sets ``indent_next`` to that level so the stage's
    own entries nest under it. The exit line sits at the same level and sets
    ``indent_next`` back to base for whatever follows.

    Usage example
    -------------
        traced = log_call(log_args(catch_errors(load)), spacing=2)
        traced({"path": "a.csv"}).logs
    """
    label = stage_name(f) if name is None else name

    @functools.wraps(f)
    def wrapped(opts: Mapping[str, Any]) -> Any:
        logs = current_logs(opts)
        base_indent = logs[-1].indent if logs else 0
        indent = base_indent + spacing

        entry_logs = append(logs, f"--> {label}", level=Level.INFO, indent=indent, indent_next=indent)
        response = f(with_logs(opts, entry_logs))

        response_logs = current_logs(response) if has_own_logs(response) else entry_logs
        final_logs = append(response_logs, f"<-- {label}", level=Level.INFO, indent=indent, indent_next=base_indent)
        if not is_log_carrier(response):
            response = grab(response)
        return with_logs(response, final_logs)

    return wrapped
