from __future__ import annotations

from pathlib import Path

import pytest

from bucket.config import ConfigError
from bucket.error.printer import error_report, handle_error, to_file


def _error() -> tuple:
    return (ValueError("bad input"), "Traceback: line 1")


def test_error_report_lists_class_message_and_stacktrace() -> None:
    report = error_report(_error())
    assert report is not None
    assert "error class: ValueError" in report
    assert "error message: bad input" in report
    assert "stacktrace:\nTraceback: line 1" in report
    assert error_report((None, None)) is None


def test_to_file_uses_name_without_timestamp(tmp_path: Path) -> None:
    path = to_file(_error(), dir=tmp_path, name="stage", timestamp=False)
    assert path == tmp_path / "stage.log"
    assert "bad input" in path.read_text(encoding="utf-8")


def test_to_file_defaults_to_error_log(tmp_path: Path) -> None:
    path = to_file(_error(), dir=tmp_path, timestamp=False)
    assert path is not None and path.name == "error.log"


def test_handle_error_continue_prints_and_returns(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    path = handle_error(_error(), out="both", dir=tmp_path, name="run", timestamp=False, exit="continue")
    assert path == tmp_path / "run.log"
    assert "bad input" in capsys.readouterr().out


def test_handle_error_fail_and_success_exit(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as info:
        handle_error(_error(), out="none", exit="fail")
    assert info.value.code == 1

    with pytest.raises(SystemExit) as info:
        handle_error(_error(), out="none", exit="success")
    assert info.value.code == 0


def test_handle_error_without_cause_is_noop(tmp_path: Path) -> None:
    assert handle_error((None, None), out="both", dir=tmp_path, exit="fail") is None
    assert list(tmp_path.iterdir()) == []


def test_handle_error_rejects_unknown_modes() -> None:
    with pytest.raises(ConfigError, match="output mode"):
        handle_error(_error(), out="printer")
    with pytest.raises(ConfigError, match="exit mode"):
        handle_error(_error(), out="none", exit="maybe")
