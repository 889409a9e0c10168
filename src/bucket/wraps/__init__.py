"""
wraps subpackage: decorators that turn a plain ``opts -> result`` function into a pipeline stage.

Key primitives
--------------
- catch_errors(): exceptions become a failed Bucket, never raised
- redirect_stdout(): printed output becomes log entries
- log_args(): arguments are logged (with secret redaction) before the call
- log_call(): ``-->`` / ``<--`` entry/exit tracing with nested indentation
- wrap(): all of the above, composed inside-out in that order
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from bucket.config import BucketConfig

from .catch_errors import catch_errors
from .log_args import log_args
from .log_call import log_call, stage_name
from .redirect_stdout import redirect_stdout


def wrap(
    f: Callable[..., Any],
    *,
    catch: bool = True,
    capture_stdout: bool = True,
    log_arguments: bool = True,
    check_secrets: Optional[bool] = None,
    trace: bool = True,
    spacing: Optional[int] = None,
    config: Optional[BucketConfig] = None,
) -> Callable[..., Any]:
    """
    Decorate `f` with the standard stage wrappers.

    Layers are applied from the inside out: catch_errors, redirect_stdout,
    log_args, log_call. `spacing` and `check_secrets` default to the values on
    `config` (``BucketConfig()`` when omitted).

    Usage example
    -------------
        stage = wrap(load, spacing=2, capture_stdout=False)
        result = stage({"path": "a.csv", "logs": ()})
    """
    cfg = config if config is not None else BucketConfig()
    spacing = cfg.spacing if spacing is None else spacing
    check_secrets = cfg.check_secrets if check_secrets is None else check_secrets

    wrapped = f
    if catch:
        wrapped = catch_errors(wrapped)
    if capture_stdout:
        wrapped = redirect_stdout(wrapped)
    if log_arguments:
        wrapped = log_args(wrapped, check_secrets=check_secrets)
    if trace:
        wrapped = log_call(wrapped, spacing=spacing)
    return wrapped


__all__ = [
    "catch_errors",
    "log_args",
    "log_call",
    "redirect_stdout",
    "stage_name",
    "wrap",
]
