"""The Bucket carrier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from bucket.error.sink import EMPTY_ERROR, ErrorTuple, normalize_error
from bucket.log.entry import LogEntry, LogTrail, ensure_logs

from .ids import generate_ulid, ulid_timestamp_ms


@dataclass(frozen=True)
class Bucket:
    """
    Carrier threading a value, an error, a log trail and metadata through a pipeline.

    Parameters
    ----------
    id
        ULID string, unique per bucket.
    name
        Display label, ``"<id>-bucket"`` unless given.
    meta
        Free-form metadata.
    error
        ``(cause, detail)`` tuple; normalized on construction.
    logs
        Ordered tuple of LogEntry values.
    value
        The payload.

    Usage example
    -------------
        b = grab(42, meta={"source": "api"}, name="api-result")
        b.value       # 42
        b.error       # (None, None)
    """

    id: str
    name: str
    meta: Mapping[str, Any] = field(default_factory=dict)
    error: ErrorTuple = EMPTY_ERROR
    logs: LogTrail = ()
    value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "error", normalize_error(self.error))
        object.__setattr__(self, "logs", ensure_logs(self.logs))
        if self.meta is None:
            object.__setattr__(self, "meta", {})

    @property
    def failed(self) -> bool:
        return self.error[0] is not None

    @property
    def created_ms(self) -> int:
        """Creation time encoded in the ULID id (ms since epoch)."""
        return ulid_timestamp_ms(self.id)


def grab(
    value: Any = None,
    *,
    logs: Optional[Iterable[LogEntry]] = None,
    error: Any = None,
    meta: Optional[Mapping[str, Any]] = None,
    name: Optional[str] = None,
    id: Optional[str] = None,
) -> Bucket:
    """
    Grab a fresh Bucket, optionally with something already in it.

    Usage example
    -------------
        grab()
        grab(42, logs=previous.logs, name="api-result")
        grab(None, error=make_error(exc))
    """
    bucket_id = id if id is not None else generate_ulid()
    return Bucket(
        id=bucket_id,
        name=name if name is not None else f"{bucket_id}-bucket",
        meta=dict(meta) if meta is not None else {},
        error=normalize_error(error),
        logs=ensure_logs(logs),
        value=value,
    )
