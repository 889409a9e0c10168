"""Serialization and summaries of buckets."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from rich.console import Console

from bucket.config import ConfigError, check_out_mode
from bucket.core.bucket import Bucket
from bucket.core.formatting import output_path
from bucket.core.plain import to_plain
from bucket.error.entry import SerializedError, error_message
from bucket.log.entry import LogEntry

FORMATS: dict[str, str] = {"json": "json", "yaml": "yaml"}


def to_dict(bucket: Bucket) -> dict[str, Any]:
    """Plain, JSON/YAML-safe representation of a bucket."""
    cause, stacktrace = bucket.error
    if cause is not None:
        error = {
            "exception": to_plain(cause),
            "message": error_message(cause),
            "stacktrace": stacktrace,
        }
    else:
        error = {"exception": None, "message": stacktrace, "stacktrace": None}
    return {
        "id": bucket.id,
        "name": bucket.name,
        "meta": to_plain(bucket.meta),
        "error": error,
        "logs": [to_plain(e.to_dict()) for e in bucket.logs],
        "value": to_plain(bucket.value),
    }


def from_dict(data: Mapping[str, Any]) -> Bucket:
    """
    Rebuild a bucket from ``to_dict`` output.

    The original exception cannot be restored; a SerializedError holding the
    recorded exception text stands in for it.
    """
    raw_error = data.get("error") or {}
    exception = raw_error.get("exception")
    if exception is not None:
        error = (SerializedError(str(exception)), raw_error.get("stacktrace"))
    else:
        error = (None, raw_error.get("message"))
    return Bucket(
        id=str(data["id"]),
        name=str(data.get("name") or f"{data['id']}-bucket"),
        meta=dict(data.get("meta") or {}),
        error=error,
        logs=tuple(LogEntry.from_dict(e) for e in data.get("logs") or []),
        value=data.get("value"),
    )


def serialize(bucket: Bucket, fmt: str = "json") -> str:
    """Serialize to a JSON or YAML string; other formats raise ConfigError."""
    if fmt == "json":
        return json.dumps(to_dict(bucket), ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(to_dict(bucket), sort_keys=False, allow_unicode=True)
    raise ConfigError(f"Unsupported format: {fmt!r} (supported: {', '.join(FORMATS)})")


def deserialize(text: str, fmt: str = "json") -> Bucket:
    if fmt == "json":
        return from_dict(json.loads(text))
    if fmt == "yaml":
        return from_dict(yaml.safe_load(text))
    raise ConfigError(f"Unsupported format: {fmt!r} (supported: {', '.join(FORMATS)})")


def serialize_bucket(
    bucket: Bucket,
    *,
    fmt: str = "json",
    out: str = "stdout",
    dir: Optional[Path] = None,
    name: Optional[str] = None,
    timestamp: bool = True,
) -> str:
    """
    Serialize a bucket and emit it according to `out`.

    Files are written to ``<dir>/<file>.<fmt>`` (dir defaults to the current
    directory). Returns the serialized text.

    Usage example
    -------------
        text = serialize_bucket(result, fmt="yaml", out="file", dir=Path("out"), name="run")
    """
    serialized = serialize(bucket, fmt)
    check_out_mode(out)
    if out in ("stdout", "both"):
        Console(highlight=False, soft_wrap=True).print(serialized, markup=False)
    if out in ("file", "both"):
        path = output_path(Path(dir) if dir is not None else Path("."), name, timestamp=timestamp, kind="bucket", ext=FORMATS[fmt])
        path.write_text(serialized, encoding="utf-8")
    return serialized


def _value_type(value: Any) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, complex)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return "unknown"


def summarize(bucket: Bucket) -> dict[str, Any]:
    """Condensed view of a bucket: identifiers plus derived stats."""
    cause, detail = bucket.error
    return {
        "id": bucket.id,
        "name": bucket.name,
        "meta": dict(bucket.meta),
        "log_count": len(bucket.logs),
        "has_error": cause is not None or detail is not None,
        "error_type": "exception" if cause is not None else ("message" if detail is not None else None),
        "value_type": _value_type(bucket.value),
        "value_is_none": bucket.value is None,
    }
