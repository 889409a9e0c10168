from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, Callable

from bucket.log.entry import append, next_indent
from bucket.log.secret import redact
from bucket.log.sink import current_logs, has_own_logs, is_log_carrier, with_logs

Stage = Callable[[Mapping[str, Any]], Any]


def _arguments(opts: Any) -> dict[Any, Any]:
    """Loggable arguments of `opts`: mapping items or carrier fields, without the trail."""
    if isinstance(opts, Mapping):
        return {k: v for k, v in opts.items() if k != "logs"}
    if is_log_carrier(opts):
        return {f.name: getattr(opts, f.name) for f in fields(opts) if f.name != "logs"}
    return {}


def _arg_text(key: Any, value: Any, check_secrets: bool) -> str:
    if check_secrets:
        value = redact({key: value})[key]
    return f"arg: {key}, value: {value!r}"


def log_args(f: Stage, *, check_secrets: bool = True) -> Stage:
    """
    Wrap a stage so its arguments are logged before it runs.

    Every key of the options mapping (or every field of a Bucket passed in its
    place) except ``"logs"`` is logged, sorted by ``str(key)``: an ``"args:"``
    header, then one ``"arg: <key>, value: <value>"`` entry per argument, all at the baseline indentation of the incoming trail.
    The last entry restores that baseline through ``indent_next``. With no
    arguments a single ``"args: {}"`` entry is written.

    If the result is a carrier without a trail of its own, the augmented trail
    is attached to it; otherwise the result is returned untouched.
    """

    @functools.wraps(f)
    def wrapped(opts: Mapping[str, Any]) -> Any:
        logs = current_logs(opts)
        baseline = next_indent(logs)
        args = _arguments(opts)

        if args:
            lines = ["args:"] + [_arg_text(k, args[k], check_secrets) for k in sorted(args, key=str)]
        else:
            lines = ["args: {}"]
        for i, line in enumerate(lines):
            last = i == len(lines) - 1
            logs = append(logs, line, indent=baseline, indent_next=baseline if last else None)

        response = f(with_logs(opts, logs))
        if is_log_carrier(response) and not has_own_logs(response):
            return with_logs(response, logs)
        return response

    return wrapped
