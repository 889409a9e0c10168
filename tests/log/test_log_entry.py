from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bucket.log import critical, debug, info, log, warning
from bucket.log.entry import Level, LogEntry, append, ensure_logs, make_entry, next_indent
from bucket.log.secret import REDACTED


def test_append_to_empty_trail_defaults() -> None:
    logs = append((), "hello")

    assert len(logs) == 1
    entry = logs[0]
    assert entry.value == "hello"
    assert entry.level == Level.INFO
    assert entry.indent == 0
    assert entry.indent_next is None
    assert entry.time.tzinfo is not None


def test_append_returns_new_trail() -> None:
    first = append((), "one")
    second = append(first, "two")
    assert len(first) == 1
    assert [e.value for e in second] == ["one", "two"]


def test_append_inherits_previous_indent() -> None:
    logs = append((), "a", indent=6)
    logs = append(logs, "b")
    assert logs[-1].indent == 6


def test_indent_next_supersedes_indent() -> None:
    logs = append((), "enter", indent=4, indent_next=8)
    logs = append(logs, "inside")
    assert logs[-1].indent == 8
    assert next_indent(logs) == 8


def test_explicit_indent_wins() -> None:
    logs = append((), "enter", indent=4, indent_next=8)
    logs = append(logs, "pinned", indent=1)
    assert logs[-1].indent == 1


def test_append_accepts_lists_and_level_strings() -> None:
    logs = append([make_entry("x")], "careful", level="warn")
    assert isinstance(logs, tuple)
    assert logs[-1].level == Level.WARNING


def test_check_secrets_redacts_structured_message() -> None:
    logs = append((), {"user": "ann", "password": "hunter2"}, check_secrets=True)
    assert logs[0].value == {"user": "ann", "password": REDACTED}


def test_ensure_logs() -> None:
    assert ensure_logs(None) == ()
    assert ensure_logs("not logs") == ()
    entry = make_entry("x")
    assert ensure_logs([entry]) == (entry,)


def test_level_rank_order() -> None:
    ranks = [lvl.rank for lvl in (Level.DEBUG, Level.INFO, Level.WARNING, Level.ERROR, Level.CRITICAL)]
    assert ranks == sorted(ranks)
    with pytest.raises(ValueError):
        Level.parse("loud")


def test_log_entry_dict_roundtrip_keeps_fields() -> None:
    entry = LogEntry(
        indent=2,
        time=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        level=Level.ERROR,
        value="boom",
        indent_next=0,
    )
    data = entry.to_dict()
    assert data["time"] == "2024-01-15T10:30:00+00:00"
    assert data["level"] == "error"
    assert LogEntry.from_dict(data) == entry


def test_from_dict_accepts_epoch_millis() -> None:
    entry = LogEntry.from_dict({"indent": 0, "time": 1705314600000, "level": "info", "value": "x"})
    assert entry.time == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def test_log_helpers_work_on_every_sink_shape() -> None:
    assert log(None, "a")[0].value == "a"

    trail = info((), "b")
    assert trail[0].level == Level.INFO

    mapping = debug({"logs": trail}, "c")
    assert [e.value for e in mapping["logs"]] == ["b", "c"]
    assert mapping["logs"][-1].level == Level.DEBUG

    assert warning((), "w")[0].level == Level.WARNING
    assert critical((), "c", indent=3)[0].indent == 3
