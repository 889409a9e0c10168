"""
spouts subpackage: helpers that consume finished buckets.

- extract: spill() and drain_*() accessors
- chain: pour_into() to combine two buckets' histories
- aggregate: collect_metrics(), collect_errors(), merge_into()
- transform: serialize_bucket(), summarize(), to_dict()/from_dict()
"""

from .aggregate import collect_errors, collect_metrics, merge_into
from .chain import pour_into
from .extract import (
    drain_error,
    drain_id,
    drain_logs,
    drain_meta,
    drain_name,
    drain_timestamp,
    drain_value,
    spill,
)
from .transform import deserialize, from_dict, serialize, serialize_bucket, summarize, to_dict

__all__ = [
    "collect_errors",
    "collect_metrics",
    "deserialize",
    "drain_error",
    "drain_id",
    "drain_logs",
    "drain_meta",
    "drain_name",
    "drain_timestamp",
    "drain_value",
    "from_dict",
    "merge_into",
    "pour_into",
    "serialize",
    "serialize_bucket",
    "spill",
    "summarize",
    "to_dict",
]
