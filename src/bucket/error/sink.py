"""Normalization of error values and the ErrorSink read/replace capability.

An error is always carried as a two-slot tuple ``(cause, detail)``. The
functions here accept the shapes that show up in practice (bare tuples,
lists and other sequences, mappings with an ``"error"`` key, Buckets and
other dataclass carriers, ``None``) and never raise on malformed input.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import is_dataclass, replace
from itertools import islice
from typing import Any, Optional, Tuple

ErrorTuple = Tuple[Any, Optional[str]]

EMPTY_ERROR: ErrorTuple = (None, None)


def normalize_error(error: Any) -> ErrorTuple:
    """
    Normalize any value into a well-formed ``(cause, detail)`` tuple.

    - ``None``                      -> ``(None, None)``
    - list/tuple/other sequences    -> first two items, padded with ``None``
    - exception instances           -> ``(exc, None)``
    - anything else                 -> ``(None, None)``
    """
    if error is None:
        return EMPTY_ERROR
    if isinstance(error, (list, tuple)) or (
        isinstance(error, Sequence) and not isinstance(error, (str, bytes, bytearray))
    ):
        items = list(islice(error, 2))
        items.extend([None] * (2 - len(items)))
        return (items[0], items[1])
    if isinstance(error, BaseException):
        return (error, None)
    return EMPTY_ERROR


def _is_carrier(sink: Any) -> bool:
    return is_dataclass(sink) and not isinstance(sink, type) and hasattr(sink, "error")


def current_error(sink: Any) -> ErrorTuple:
    """Return the normalized error carried by `sink`."""
    if _is_carrier(sink):
        return normalize_error(sink.error)
    if isinstance(sink, Mapping):
        return normalize_error(sink.get("error"))
    return normalize_error(sink)


def with_error(sink: Any, error: Any) -> Any:
    """
    Return `sink` updated to carry `error`.

    Mappings and carriers keep their shape with the error slot replaced;
    tuples, sequences and ``None`` degenerate to the normalized tuple itself.
    """
    normalized = normalize_error(error)
    if _is_carrier(sink):
        return replace(sink, error=normalized)
    if isinstance(sink, Mapping):
        updated = dict(sink)
        updated["error"] = normalized
        return updated
    return normalized
