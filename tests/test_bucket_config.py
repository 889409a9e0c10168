from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bucket.config import BucketConfig, ConfigError, check_exit_mode, check_out_mode, load_config


def test_defaults() -> None:
    cfg = BucketConfig()
    assert cfg.spacing == 4
    assert cfg.check_secrets is True
    assert (cfg.log_out, cfg.meta_out, cfg.error_out, cfg.exit) == ("both", "both", "both", "fail")
    assert cfg.log_dir == Path("logs")


@pytest.mark.parametrize(
    "kwargs",
    [{"spacing": -1}, {"log_out": "printer"}, {"meta_out": ""}, {"exit": "abort"}],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        BucketConfig(**kwargs)


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        check_out_mode("nowhere")
    assert check_exit_mode("continue") == "continue"


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BUCKET_SPACING", "2")
    monkeypatch.setenv("BUCKET_CHECK_SECRETS", "0")
    monkeypatch.setenv("BUCKET_ERROR_OUT", "stdout")
    monkeypatch.setenv("BUCKET_EXIT", "continue")
    monkeypatch.setenv("BUCKET_OUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("BUCKET_LOG_DIR", str(tmp_path / "mylogs"))
    monkeypatch.setenv("BUCKET_WRITE_JSONL", "yes")

    cfg = BucketConfig.from_env()
    assert cfg.spacing == 2
    assert cfg.check_secrets is False
    assert cfg.error_out == "stdout"
    assert cfg.exit == "continue"
    assert cfg.out_dir == tmp_path / "out"
    assert cfg.log_dir == tmp_path / "mylogs"
    assert cfg.write_jsonl is True


def test_from_env_ignores_malformed_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUCKET_SPACING", "wide")
    monkeypatch.setenv("BUCKET_EXIT", "explode")
    cfg = BucketConfig.from_env()
    assert cfg.spacing == 4
    assert cfg.exit == "fail"


def test_from_env_custom_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MYAPP_SPACING", "8")
    cfg = BucketConfig.from_env(default=BucketConfig(env_prefix="MYAPP_", console_level=logging.WARNING))
    assert cfg.spacing == 8
    assert cfg.console_level == logging.WARNING


def test_from_mapping_converts_and_rejects_unknown() -> None:
    cfg = BucketConfig.from_mapping({"spacing": "3", "out_dir": "build/out"})
    assert cfg.spacing == 3
    assert cfg.out_dir == Path("build/out")

    with pytest.raises(ConfigError, match="Unknown config keys: spacng"):
        BucketConfig.from_mapping({"spacng": 3})


def test_load_config_prefers_bucket_yaml(tmp_path: Path) -> None:
    (tmp_path / ".bucket.yaml").write_text("spacing: 6\n", encoding="utf-8")
    assert load_config(tmp_path).spacing == 6

    (tmp_path / "bucket.yaml").write_text("spacing: 2\nexit: continue\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg.spacing == 2
    assert cfg.exit == "continue"


def test_load_config_defaults_and_bad_shape(tmp_path: Path) -> None:
    assert load_config(tmp_path) == BucketConfig()
    (tmp_path / "bucket.yaml").write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)
