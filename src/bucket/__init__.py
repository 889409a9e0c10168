"""
bucket: composable carriers for fallible, loggable pipeline stages.

Key primitives
--------------
- Bucket / grab(): the carrier (id, name, meta, error, logs, value)
- pass_(), stir_in(), consolidate(), bucketize(), pass_to(), gather(), gather_with():
  combinators that accumulate logs and short-circuit on error
- catch_errors(), log_args(), log_call(), redirect_stdout(), wrap(): stage wrappers
- current_error() / with_error(), current_logs() / with_logs(): sink access
- BucketConfig: shared defaults (spacing, secret checks, output modes)
"""

from .config import BucketConfig, ConfigError
from .core.bucket import Bucket, grab
from .core.monad import bind, compose, fmap, join, lift, map_m, sequence
from .error import EMPTY_ERROR, current_error, make_error, normalize_error, with_error
from .log import Level, LogEntry, current_logs, with_logs
from .version import __version__
from .wraps import catch_errors, log_args, log_call, redirect_stdout, wrap

pass_ = bind
stir_in = fmap
consolidate = join
bucketize = lift
pass_to = compose
gather = sequence
gather_with = map_m

__all__ = [
    "Bucket",
    "BucketConfig",
    "ConfigError",
    "EMPTY_ERROR",
    "Level",
    "LogEntry",
    "__version__",
    "bucketize",
    "catch_errors",
    "consolidate",
    "current_error",
    "current_logs",
    "gather",
    "gather_with",
    "grab",
    "log_args",
    "log_call",
    "make_error",
    "normalize_error",
    "pass_",
    "pass_to",
    "redirect_stdout",
    "stir_in",
    "with_error",
    "with_logs",
    "wrap",
]
