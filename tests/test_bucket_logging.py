from __future__ import annotations

import json
import logging
from pathlib import Path

from bucket import grab
from bucket.config import BucketConfig
from bucket.log.entry import Level, append
from bucket.logging import JsonlLogWriter, configure_logging, emit


def _cfg(tmp_path: Path, **kwargs: object) -> BucketConfig:
    return BucketConfig(
        log_dir=tmp_path / "logs",
        console_level=logging.CRITICAL,  # keep test output quiet
        file_level=logging.DEBUG,
        **kwargs,  # type: ignore[arg-type]
    )


def test_jsonl_writer_writes_one_line_per_entry(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "trail.jsonl"
    logs = append(append((), "start"), "oops", level=Level.ERROR, indent=4, indent_next=0)
    written = JsonlLogWriter(path=path).write(grab(None, logs=logs, name="job"))

    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert written == 2
    assert len(lines) == 2

    a, b = (json.loads(line) for line in lines)
    assert a["value"] == "start"
    assert a["level"] == "info"
    assert a["bucket"] == "job"
    assert b["indent"] == 4
    assert b["indent_next"] == 0
    assert b["level"] == "error"


def test_configure_logging_creates_log_file_and_writes(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path)
    logger, writer = configure_logging(cfg=cfg)
    assert writer is None

    logger.info("hello world")
    text = (cfg.log_dir / "bucket.log").read_text(encoding="utf-8")
    assert "hello world" in text
    assert "| bucket | INFO |" in text


def test_configure_logging_returns_writer_when_enabled(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, write_jsonl=True)
    _, writer = configure_logging(cfg=cfg)
    assert writer is not None
    assert writer.path == cfg.log_dir / "trail.jsonl"


def test_emit_replays_trail_with_levels(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path)
    logger, _ = configure_logging(cfg=cfg)
    logs = append(append((), "loading", indent=2), "bad row", level=Level.WARNING)

    emit(grab(None, logs=logs), logger)
    text = (cfg.log_dir / "bucket.log").read_text(encoding="utf-8")
    assert "| INFO |   loading" in text
    assert "| WARNING |   bad row" in text


def test_library_loggers_propagate_to_configured_logger(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path)
    configure_logging(cfg=cfg)
    logging.getLogger("bucket.wraps.catch_errors").debug("from a module")
    assert "from a module" in (cfg.log_dir / "bucket.log").read_text(encoding="utf-8")
