from __future__ import annotations

from bucket import Bucket, BucketConfig, bucketize, grab
from bucket.wraps import wrap


def load(opts: dict) -> Bucket:
    print("reading")
    return grab(opts["n"] * 2, logs=opts.get("logs"))


def broken(opts: dict) -> Bucket:
    raise KeyError("missing")


def test_wrap_applies_all_layers() -> None:
    result = wrap(load)({"n": 2, "token": "abc"})
    values = [e.value for e in result.logs]

    assert result.value == 4
    assert values == [
        "--> load",
        "args:",
        "arg: n, value: 2",
        "arg: token, value: '* log redacted *'",
        "reading",
        "<-- load",
    ]
    assert result.logs[0].indent == 4


def test_wrap_uses_config_defaults() -> None:
    cfg = BucketConfig(spacing=2, check_secrets=False)
    result = wrap(load, config=cfg, capture_stdout=False)({"n": 1, "token": "abc"})
    assert result.logs[0].indent == 2
    assert "arg: token, value: 'abc'" in [e.value for e in result.logs]


def test_wrap_layers_can_be_disabled() -> None:
    result = wrap(load, capture_stdout=False, log_arguments=False, trace=False)({"n": 1})
    assert result.logs == ()


def test_wrap_catches_failures() -> None:
    result = wrap(broken)({"n": 1})
    assert isinstance(result.error[0], KeyError)
    assert [e.value for e in result.logs][0] == "--> broken"
    assert result.logs[-1].value == "<-- broken"


def test_wrap_accepts_bucket_input() -> None:
    def double(x: int) -> int:
        return x * 2

    start = grab(5)
    result = wrap(bucketize(double))(start)
    values = [e.value for e in result.logs]

    assert result.error == (None, None)
    assert result.value == 10
    assert result.id == start.id
    assert values[0] == "--> double"
    assert "arg: value, value: 5" in values
    assert values[-1] == "<-- double"


def test_wrap_bucket_input_failure_keeps_trail() -> None:
    def explode(x: int) -> int:
        raise ZeroDivisionError("no")

    result = wrap(bucketize(explode))(grab(5))
    assert isinstance(result.error[0], ZeroDivisionError)
    assert result.logs[0].value == "--> explode"
    assert result.logs[-1].value == "<-- explode"
