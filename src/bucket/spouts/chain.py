"""Combining the history of two buckets."""

from __future__ import annotations

from typing import Any, Optional

from bucket.config import ConfigError
from bucket.core.bucket import Bucket
from bucket.core.monad import fmap, sequence
from bucket.log.entry import LogTrail

POUR_TYPES = ("gather", "drop", "stir_in")
META_MERGE_TYPES = ("merge", "snapshot")


def combine_logs(from_bucket: Bucket, to_bucket: Bucket) -> LogTrail:
    """Logs of both buckets, sorted by time (stable for equal timestamps)."""
    return tuple(sorted(from_bucket.logs + to_bucket.logs, key=lambda e: e.time))


def merge_metadata(from_bucket: Bucket, to_bucket: Bucket, merge_type: str = "merge") -> dict[str, Any]:
    if merge_type == "merge":
        return {**from_bucket.meta, **to_bucket.meta}
    if merge_type == "snapshot":
        to_meta = dict(to_bucket.meta)
        previous = list(to_meta.get("previous_buckets", []))
        previous.append({from_bucket.id: dict(from_bucket.meta)})
        to_meta["previous_buckets"] = previous
        return to_meta
    raise ConfigError(f"Unsupported meta merge type: {merge_type!r} (expected one of {', '.join(META_MERGE_TYPES)})")


def combine_values(from_bucket: Bucket, to_bucket: Bucket, pour_type: str = "gather") -> Any:
    """
    Combine the values of two buckets.

    - "gather":  ``[from.value, to.value]``
    - "drop":    ``to.value``
    - "stir_in": ``from.value`` is a function applied to ``to.value``
    """
    if pour_type == "gather":
        return sequence([from_bucket, to_bucket]).value
    if pour_type == "drop":
        return to_bucket.value
    if pour_type == "stir_in":
        return fmap(from_bucket.value, to_bucket).value
    raise ConfigError(f"Unsupported pour type: {pour_type!r} (expected one of {', '.join(POUR_TYPES)})")


def pour_into(
    new_bucket: Bucket,
    old_bucket: Bucket,
    *,
    new_name: Optional[str] = None,
    meta_merge: str = "merge",
    pour_type: str = "gather",
) -> Bucket:
    """
    Pour `old_bucket` into `new_bucket`, keeping both histories.

    The result keeps the id and error of `new_bucket`; logs are merged
    chronologically, metadata by `meta_merge` and values by `pour_type`.

    Usage example
    -------------
        merged = pour_into(step2, step1, pour_type="drop", meta_merge="snapshot")
    """
    return Bucket(
        id=new_bucket.id,
        name=new_name if new_name is not None else new_bucket.name,
        meta=merge_metadata(old_bucket, new_bucket, meta_merge),
        error=new_bucket.error,
        logs=combine_logs(old_bucket, new_bucket),
        value=combine_values(old_bucket, new_bucket, pour_type),
    )
