from __future__ import annotations

from bucket import Bucket, grab
from bucket.log.entry import append
from bucket.wraps import log_args, log_call


def demo(opts: dict) -> Bucket:
    return grab("ok", logs=opts.get("logs"))


def test_entry_and_exit_around_noop() -> None:
    result = log_call(lambda opts: opts, spacing=4)({})
    logs = result["logs"]

    assert [e.value for e in logs] == ["--> ", "<-- "]
    assert [e.indent for e in logs] == [4, 4]
    assert logs[0].indent_next == 4
    assert logs[1].indent_next == 0


def test_uses_function_name_and_existing_indent() -> None:
    prior = append((), "pre", indent=6)
    result = log_call(demo)({"logs": prior})
    pre, enter, exit_ = result.logs

    assert result.value == "ok"
    assert pre == prior[0]
    assert (enter.value, exit_.value) == ("--> demo", "<-- demo")
    assert (enter.indent, exit_.indent) == (10, 10)
    assert exit_.indent_next == 6


def test_nested_calls_indent_one_level_deeper() -> None:
    traced = log_call(log_call(lambda opts: opts, spacing=2), spacing=2)
    logs = traced({})["logs"]
    assert [e.indent for e in logs] == [2, 4, 4, 2]
    assert [e.value[:3] for e in logs] == ["-->", "-->", "<--", "<--"]
    assert logs[2].indent_next == 2
    assert logs[3].indent_next == 0


def test_entries_after_exit_return_to_base() -> None:
    logs = log_call(demo, spacing=4)({}).logs
    assert append(logs, "next")[-1].indent == 0


def test_falls_back_to_entry_logs_when_result_has_none() -> None:
    result = log_call(lambda opts: {"value": 1}, spacing=3)({})
    assert [e.value for e in result["logs"]] == ["--> ", "<-- "]


def test_plain_result_is_lifted_into_bucket() -> None:
    def answer(opts: dict) -> int:
        return 42

    result = log_call(answer)({})
    assert isinstance(result, Bucket)
    assert result.value == 42
    assert [e.value for e in result.logs] == ["--> answer", "<-- answer"]


def test_explicit_name_overrides() -> None:
    result = log_call(demo, name="load")({})
    assert result.logs[0].value == "--> load"


def test_log_args_nests_under_log_call() -> None:
    stage = log_call(log_args(demo), spacing=4)
    logs = stage({"path": "a.csv"}).logs
    assert [e.value for e in logs] == ["--> demo", "args:", "arg: path, value: 'a.csv'", "<-- demo"]
    assert [e.indent for e in logs] == [4, 4, 4, 4]
    assert logs[-1].indent_next == 0
