from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from rich.logging import RichHandler

from bucket.config import BucketConfig
from bucket.core.plain import to_plain
from bucket.log.entry import Level
from bucket.log.sink import current_logs

_LEVELS = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARNING: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.CRITICAL: logging.CRITICAL,
}


@dataclass
class JsonlLogWriter:
    """
    Appends log trails as JSON lines.

    Each line holds one entry:
    - indent
    - time (ISO-8601, UTC)
    - level
    - value
    - indent_next (optional)
    - bucket (optional; name of the bucket the trail came from)

    Usage example
    -------------
        writer = JsonlLogWriter(path=Path("logs/trail.jsonl"))
        writer.write(result)
    """
    path: Path

    def write(self, sink: Any) -> int:
        """Append every entry held by `sink`; returns the number of lines written."""
        logs = current_logs(sink)
        bucket_name = getattr(sink, "name", None)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            for entry in logs:
                payload = to_plain(entry.to_dict())
                if bucket_name is not None:
                    payload["bucket"] = bucket_name
                f.write(json.dumps(payload, ensure_ascii=False) + "\n")
        return len(logs)


def emit(sink: Any, logger: logging.Logger) -> None:
    """
    Replay the trail held by `sink` onto a stdlib logger.

    Levels map onto the logging levels of the same name; indentation is
    rendered as leading spaces.
    """
    for entry in current_logs(sink):
        logger.log(_LEVELS[entry.level], "%s%s", " " * entry.indent, entry.value)


def configure_logging(*, cfg: BucketConfig) -> tuple[logging.Logger, Optional[JsonlLogWriter]]:
    """
    Configure console + file logging, plus an optional JSON-lines trail writer.

    Returns
    -------
    logger
        The configured "bucket" logger; the library's module loggers
        (``bucket.wraps.catch_errors`` and friends) propagate to it.
    jsonl_writer
        JsonlLogWriter if cfg.write_jsonl else None.

    Usage example
    -------------
        logger, writer = configure_logging(cfg=BucketConfig(log_dir=Path("logs")))
        emit(result, logger)
    """
    log_dir = cfg.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("bucket")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = RichHandler(show_path=False, markup=False)
    console_handler.setLevel(cfg.console_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    # File handler (always plain)
    file_handler = logging.FileHandler(log_dir / "bucket.log", encoding="utf-8")
    file_handler.setLevel(cfg.file_level)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    jsonl_writer = None
    if cfg.write_jsonl:
        jsonl_writer = JsonlLogWriter(path=log_dir / "trail.jsonl")

    logger.debug("Logging configured (log_dir=%s, spacing=%s)", str(log_dir), cfg.spacing)
    return logger, jsonl_writer
