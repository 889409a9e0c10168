from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Mapping, Optional
import logging
import os

import yaml

OutMode = Literal["none", "stdout", "file", "both"]
ExitMode = Literal["success", "fail", "continue"]

OUT_MODES: tuple[str, ...] = ("none", "stdout", "file", "both")
EXIT_MODES: tuple[str, ...] = ("success", "fail", "continue")

DEFAULT_SPACING = 4


class ConfigError(ValueError):
    """Raised when an option, mode or configuration value is not supported."""


def check_out_mode(out: str) -> str:
    """Return `out` if it is a supported output mode, else raise ConfigError."""
    if out not in OUT_MODES:
        raise ConfigError(f"Unsupported output mode: {out!r} (expected one of {', '.join(OUT_MODES)})")
    return out


def check_exit_mode(exit: str) -> str:
    """Return `exit` if it is a supported exit mode, else raise ConfigError."""
    if exit not in EXIT_MODES:
        raise ConfigError(f"Unsupported exit mode: {exit!r} (expected one of {', '.join(EXIT_MODES)})")
    return exit


def _parse_bool(raw: str, fallback: bool) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    return fallback


@dataclass(frozen=True)
class BucketConfig:
    """
    Defaults shared by the wrappers, spouts and logging setup.

    Parameters
    ----------
    spacing
        Indentation width added per nested ``log_call`` layer.
    check_secrets
        Whether ``log_args`` redacts password-like arguments by default.
    log_out, meta_out, error_out
        Output modes used by ``spill``: "none", "stdout", "file" or "both".
    exit
        What ``spill`` does when the bucket carries an error: "success" exits 0,
        "fail" exits 1, "continue" returns normally.
    out_dir
        Directory for ``spill`` file output. None lets each printer choose.
    timestamp
        Prefix written file names with a ``yyMMddHHmmssSSS`` timestamp.
    log_dir
        Directory where ``configure_logging`` writes its log files.
    console_level, file_level
        stdlib logging levels for the console and file handlers.
    write_jsonl
        If True, ``configure_logging`` also returns a JSON-lines trail writer.
    env_prefix
        Prefix for environment-variable overrides (see ``from_env``).

    Usage example
    -------------
        cfg = BucketConfig(spacing=2, error_out="stdout", exit="continue")
    """

    spacing: int = DEFAULT_SPACING
    check_secrets: bool = True

    log_out: OutMode = "both"
    meta_out: OutMode = "both"
    error_out: OutMode = "both"
    exit: ExitMode = "fail"
    out_dir: Optional[Path] = None
    timestamp: bool = True

    log_dir: Path = Path("logs")
    console_level: int = logging.INFO
    file_level: int = logging.DEBUG
    write_jsonl: bool = False

    env_prefix: str = field(default="BUCKET_", repr=False)

    def __post_init__(self) -> None:
        if self.spacing < 0:
            raise ConfigError(f"spacing must be non-negative, got {self.spacing}")
        for name in ("log_out", "meta_out", "error_out"):
            check_out_mode(getattr(self, name))
        check_exit_mode(self.exit)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base: Optional["BucketConfig"] = None) -> "BucketConfig":
        """
        Build a config from a plain mapping (e.g. a parsed YAML file).

        Unknown keys raise ConfigError so that typos do not pass silently.
        """
        base = base if base is not None else cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values: dict[str, Any] = {f.name: getattr(base, f.name) for f in fields(cls)}
        for key, value in data.items():
            if key in ("out_dir", "log_dir") and value is not None:
                value = Path(str(value))
            elif key == "spacing":
                try:
                    value = int(value)
                except (TypeError, ValueError) as exc:
                    raise ConfigError(f"spacing must be an integer, got {value!r}") from exc
            values[key] = value
        return cls(**values)

    @classmethod
    def from_env(cls, *, default: Optional["BucketConfig"] = None) -> "BucketConfig":
        """
        Create config from environment variables.

        Supported variables (prefix controlled by env_prefix on `default`):
        - <PFX>SPACING: integer
        - <PFX>CHECK_SECRETS: "1"/"0"
        - <PFX>LOG_OUT, <PFX>META_OUT, <PFX>ERROR_OUT: output mode
        - <PFX>EXIT: "success" | "fail" | "continue"
        - <PFX>OUT_DIR, <PFX>LOG_DIR: path
        - <PFX>WRITE_JSONL: "1"/"0"

        Malformed values fall back to the value on `default`.

        Usage example
        -------------
            cfg = BucketConfig.from_env(default=BucketConfig(env_prefix="MYAPP_"))
        """
        base = default if default is not None else cls()
        pfx = base.env_prefix

        spacing = base.spacing
        spacing_raw = os.getenv(f"{pfx}SPACING", "").strip()
        if spacing_raw:
            try:
                spacing = max(0, int(spacing_raw))
            except ValueError:
                spacing = base.spacing

        def _mode(name: str, current: str, allowed: tuple[str, ...]) -> str:
            raw = os.getenv(f"{pfx}{name}", current).strip().lower()
            return raw if raw in allowed else current

        out_dir_raw = os.getenv(f"{pfx}OUT_DIR", "").strip()

        return cls(
            spacing=spacing,
            check_secrets=_parse_bool(
                os.getenv(f"{pfx}CHECK_SECRETS", "1" if base.check_secrets else "0"), base.check_secrets
            ),
            log_out=_mode("LOG_OUT", base.log_out, OUT_MODES),  # type: ignore[arg-type]
            meta_out=_mode("META_OUT", base.meta_out, OUT_MODES),  # type: ignore[arg-type]
            error_out=_mode("ERROR_OUT", base.error_out, OUT_MODES),  # type: ignore[arg-type]
            exit=_mode("EXIT", base.exit, EXIT_MODES),  # type: ignore[arg-type]
            out_dir=Path(out_dir_raw) if out_dir_raw else base.out_dir,
            timestamp=base.timestamp,
            log_dir=Path(os.getenv(f"{pfx}LOG_DIR", str(base.log_dir))),
            console_level=base.console_level,
            file_level=base.file_level,
            write_jsonl=_parse_bool(
                os.getenv(f"{pfx}WRITE_JSONL", "1" if base.write_jsonl else "0"), base.write_jsonl
            ),
            env_prefix=pfx,
        )


def load_config(root: Path) -> BucketConfig:
    """
    Load bucket config from a directory if a config file is present.

    Search order:
    1) ``bucket.yaml``
    2) ``.bucket.yaml``

    Returns the defaults when neither file exists.
    """

    for filename in ("bucket.yaml", ".bucket.yaml"):
        config_path = root / filename
        if config_path.exists():
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"{config_path} must contain a mapping at the top level")
            return BucketConfig.from_mapping(data)
    return BucketConfig()
