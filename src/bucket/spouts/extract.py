"""Draining and printing finished buckets."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from bucket.config import BucketConfig, check_exit_mode, check_out_mode
from bucket.core.bucket import Bucket
from bucket.error.printer import handle_error
from bucket.error.sink import ErrorTuple
from bucket.log.entry import LogTrail
from bucket.log.printer import print_logs
from bucket.meta import print_meta


def spill(
    bucket: Bucket,
    *,
    log_out: Optional[str] = None,
    meta_out: Optional[str] = None,
    error_out: Optional[str] = None,
    exit: Optional[str] = None,
    out_dir: Optional[Path] = None,
    require_value: bool = False,
    config: Optional[BucketConfig] = None,
) -> Any:
    """
    Print the logs, metadata and error of a bucket, then return its value.

    Unset options come from `config` (``BucketConfig()`` when omitted). Files
    are named after the bucket and written under `out_dir` when given. The
    exit policy only applies when the bucket carries an error.

    Raises
    ------
    ValueError
        If `require_value` is set and the value is None.

    Usage example
    -------------
        rows = spill(result, log_out="stdout", meta_out="none", exit="continue")
    """
    cfg = config if config is not None else BucketConfig()
    log_out = check_out_mode(log_out or cfg.log_out)
    meta_out = check_out_mode(meta_out or cfg.meta_out)
    error_out = check_out_mode(error_out or cfg.error_out)
    exit = check_exit_mode(exit or cfg.exit)
    out_dir = out_dir if out_dir is not None else cfg.out_dir

    print_logs(bucket, out=log_out, dir=out_dir, name=bucket.name, timestamp=cfg.timestamp)
    print_meta(bucket.meta, out=meta_out, dir=out_dir, name=bucket.name, timestamp=cfg.timestamp)
    handle_error(bucket.error, out=error_out, dir=out_dir, name=bucket.name, timestamp=cfg.timestamp, exit=exit)

    if require_value and bucket.value is None:
        raise ValueError("Bucket value is None; call spill with require_value=False to allow it.")
    return bucket.value


def drain_logs(bucket: Bucket) -> LogTrail:
    return bucket.logs


def drain_error(bucket: Bucket) -> ErrorTuple:
    return bucket.error


def drain_value(bucket: Bucket) -> Any:
    return bucket.value


def drain_id(bucket: Bucket) -> str:
    return bucket.id


def drain_name(bucket: Bucket) -> str:
    return bucket.name


def drain_meta(bucket: Bucket) -> Mapping[str, Any]:
    return bucket.meta


def drain_timestamp(bucket: Bucket) -> int:
    """Creation time of the bucket in ms since the epoch, read from its ULID."""
    return bucket.created_ms
