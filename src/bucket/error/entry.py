from __future__ import annotations

import functools
import traceback as _traceback
from typing import Any, Callable, Optional

from .sink import EMPTY_ERROR, ErrorTuple, normalize_error


class ContextError(Exception):
    """Exception used by ``with_context`` to wrap a cause with a message."""


class SerializedError(Exception):
    """Stand-in cause for an error read back from a serialized Bucket."""


def format_traceback(exc: BaseException) -> str:
    return "".join(_traceback.format_exception(type(exc), exc, exc.__traceback__))


def make_error(exc: Optional[BaseException], stacktrace: Optional[str] = None) -> ErrorTuple:
    """
    Build an error tuple from a caught exception.

    The traceback text is captured from `exc` when `stacktrace` is not given.
    ``make_error(None)`` is the empty error.

    Usage example
    -------------
        try:
            parse(text)
        except ValueError as exc:
            error = make_error(exc)
    """
    if exc is None:
        return EMPTY_ERROR
    if stacktrace is None:
        stacktrace = format_traceback(exc)
    return (exc, stacktrace)


def is_error(error: Any) -> bool:
    """Return True when the error carries a cause."""
    return normalize_error(error)[0] is not None


def error_message(cause: Any) -> str:
    if isinstance(cause, BaseException):
        return str(cause)
    return "" if cause is None else str(cause)


def format_error(error: Any) -> Optional[str]:
    """Render an error tuple as ``Error: <message>`` plus the detail, or None."""
    cause, detail = normalize_error(error)
    if cause is None:
        return None
    text = f"Error: {error_message(cause)}"
    if detail:
        text += f"\n{detail}"
    return text


def with_context(error: Any, context: str) -> ErrorTuple:
    """Wrap the cause in a ContextError carrying `context`; the detail is kept."""
    cause, detail = normalize_error(error)
    if cause is None:
        return (cause, detail)
    wrapped = ContextError(context)
    if isinstance(cause, BaseException):
        wrapped.__cause__ = cause
    return (wrapped, detail)


def wrap_error(f: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate `f` so that an exception is returned as an error tuple."""

    @functools.wraps(f)
    def wrapped(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except Exception as exc:
            return make_error(exc)

    return wrapped
