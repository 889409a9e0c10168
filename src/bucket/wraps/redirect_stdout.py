from __future__ import annotations

import contextlib
import functools
import io
from collections.abc import Mapping
from typing import Any, Callable

from bucket.log.entry import append, next_indent
from bucket.log.sink import current_logs, has_own_logs, is_log_carrier, with_logs

Stage = Callable[[Mapping[str, Any]], Any]


def redirect_stdout(f: Stage) -> Stage:
    """
    Wrap a stage so anything it prints becomes log entries.

    Non-blank captured lines are logged at the baseline indentation of the
    incoming trail, directly after the incoming entries and before anything
    the stage appended itself. Not thread safe: ``sys.stdout`` is swapped for
    the duration of the call.

    Usage example
    -------------
        def legacy(opts):
            print("Starting process...")
            return grab(42, logs=opts.get("logs"))

        redirect_stdout(legacy)({}).logs[0].value   # "Starting process..."
    """

    @functools.wraps(f)
    def wrapped(opts: Mapping[str, Any]) -> Any:
        initial_logs = current_logs(opts)
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            response = f(opts)

        lines = [line for line in buffer.getvalue().splitlines() if line.strip()]
        if not lines:
            return response

        result_logs = current_logs(response) if has_own_logs(response) else initial_logs
        baseline = next_indent(initial_logs)
        output_logs = initial_logs
        for line in lines:
            output_logs = append(output_logs, line, indent=baseline)

        if result_logs[: len(initial_logs)] == initial_logs:
            final_logs = output_logs + result_logs[len(initial_logs):]
        else:
            final_logs = output_logs + result_logs
        if not is_log_carrier(response):
            return response
        return with_logs(response, final_logs)

    return wrapped
