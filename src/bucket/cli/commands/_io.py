"""Reading serialized buckets for the CLI commands."""

from __future__ import annotations

from pathlib import Path

from bucket.config import ConfigError
from bucket.core.bucket import Bucket
from bucket.spouts.transform import deserialize


def read_bucket(path: Path) -> Bucket:
    """Load a bucket written by ``serialize_bucket`` (format chosen by file suffix)."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        fmt = "json"
    elif suffix in (".yaml", ".yml"):
        fmt = "yaml"
    else:
        raise ConfigError(f"Cannot tell the format of {path} (expected .json, .yaml or .yml)")
    return deserialize(path.read_text(encoding="utf-8"), fmt)
