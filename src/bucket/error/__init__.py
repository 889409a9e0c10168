"""
error subpackage: two-slot error tuples and the ErrorSink capability.

Error format: ``(cause, detail)`` where cause is usually an exception and
detail a traceback string. Both slots may be None.
"""

from .entry import (
    ContextError,
    SerializedError,
    format_error,
    is_error,
    make_error,
    with_context,
    wrap_error,
)
from .printer import handle_error
from .sink import EMPTY_ERROR, ErrorTuple, current_error, normalize_error, with_error

__all__ = [
    "ContextError",
    "EMPTY_ERROR",
    "ErrorTuple",
    "SerializedError",
    "current_error",
    "format_error",
    "handle_error",
    "is_error",
    "make_error",
    "normalize_error",
    "with_context",
    "with_error",
    "wrap_error",
]
