"""Aggregation helpers over one or many buckets."""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import Any, Iterable, MutableSequence

import numpy as np

from bucket.core.bucket import Bucket
from bucket.error.sink import ErrorTuple
from bucket.log.entry import LogEntry


def collect_metrics(bucket: Bucket) -> dict[str, Any]:
    """
    Timing and volume metrics derived from a bucket's log trail.

    Returns
    -------
    dict with keys ``total_logs``, ``log_levels`` (counts per level name),
    ``first_timestamp`` / ``last_timestamp`` (datetime or None),
    ``time_span_ms`` and ``mean_gap_ms`` / ``max_gap_ms`` between consecutive
    entries (None with fewer than two entries).
    """
    logs = bucket.logs
    times = [e.time for e in logs]
    metrics: dict[str, Any] = {
        "total_logs": len(logs),
        "log_levels": dict(Counter(e.level.value for e in logs)),
        "first_timestamp": times[0] if times else None,
        "last_timestamp": times[-1] if times else None,
        "time_span_ms": None,
        "mean_gap_ms": None,
        "max_gap_ms": None,
    }
    if len(times) > 1:
        millis = np.array([t.timestamp() * 1000.0 for t in times], dtype=np.float64)
        gaps = np.diff(millis)
        metrics["time_span_ms"] = float(millis[-1] - millis[0])
        metrics["mean_gap_ms"] = float(np.mean(gaps))
        metrics["max_gap_ms"] = float(np.max(gaps))
    return metrics


def collect_errors(buckets: Iterable[Bucket]) -> list[ErrorTuple]:
    """Error tuples of every bucket that carries a cause or a detail."""
    return [b.error for b in buckets if b.error[0] is not None or b.error[1] is not None]


def merge_into(
    buckets: Iterable[Bucket],
    accumulator: MutableSequence[LogEntry],
    base_indent: int = 0,
) -> list[Any]:
    """
    Append the logs of every bucket to `accumulator`, shifted by `base_indent`.

    The accumulator is supplied and owned by the caller and is only appended
    to; callers sharing it across threads must serialize access themselves.
    Returns the bucket values in order.
    """
    values: list[Any] = []
    for bucket in buckets:
        for entry in bucket.logs:
            shifted_next = None if entry.indent_next is None else entry.indent_next + base_indent
            accumulator.append(replace(entry, indent=entry.indent + base_indent, indent_next=shifted_next))
        values.append(bucket.value)
    return values
