from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable

from bucket.core.bucket import grab
from bucket.error.entry import make_error
from bucket.log.sink import current_logs

logger = logging.getLogger(__name__)

Stage = Callable[[Mapping[str, Any]], Any]


def catch_errors(f: Stage) -> Stage:
    """
    Wrap a stage so that exceptions come back as a failed Bucket.

    Behavior
    --------
    - success: the result of `f` is returned unchanged.
    - failure: returns ``grab(None, logs=opts["logs"], error=make_error(exc))``;
      the incoming trail (of a mapping or a Bucket) is preserved as-is,
      empty when absent.

    Usage example
    -------------
        @catch_errors
        def load(opts):
            return grab(read(opts["path"]), logs=opts.get("logs"))

        load({"path": "missing.txt"}).error   # (FileNotFoundError(...), "Traceback ...")
    """

    @functools.wraps(f)
    def wrapped(opts: Mapping[str, Any]) -> Any:
        try:
            return f(opts)
        except Exception as exc:
            logger.debug("Stage '%s' failed: %s (%s)", getattr(f, "__name__", "-"), exc, type(exc).__name__)
            return grab(None, logs=current_logs(opts), error=make_error(exc))

    return wrapped
