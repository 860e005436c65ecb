"""Minimal smoke tests to ensure modules import and core managers work."""

import logging
import os

from framevision.core.config import ConfigManager
from framevision.core.logging_setup import get_artifacts_dir, prune_old_sessions, setup_logging


def test_config_defaults_and_save(tmp_path):
    cfg_path = tmp_path / "config.ini"
    cfg = ConfigManager(str(cfg_path))
    assert cfg.get("log_level") == "INFO"
    assert cfg.get_float("match_threshold") == 0.8
    assert cfg.get("template_match_mode") == "CCOEFF_NORMED"
    assert cfg.get_bool("dry_run") is False
    cfg.set("log_level", "DEBUG")
    cfg.save()
    cfg2 = ConfigManager(str(cfg_path))
    assert cfg2.get("log_level") == "DEBUG"


def test_config_env_overrides_file(tmp_path, monkeypatch):
    cfg = ConfigManager(str(tmp_path / "config.ini"))
    monkeypatch.setenv("FV_MATCH_THRESHOLD", "0.95")
    assert cfg.get_float("match_threshold") == 0.95
    assert cfg.get("no_such_key", "fallback") == "fallback"
    assert cfg.get_float("log_level", 1.5) == 1.5


def test_config_fills_missing_defaults_in_existing_file(tmp_path):
    cfg_path = tmp_path / "config.ini"
    cfg_path.write_text("[DEFAULT]\nlog_level = WARNING\n", encoding="utf-8")
    cfg = ConfigManager(str(cfg_path))
    assert cfg.get("log_level") == "WARNING"
    assert "slow_task_threshold_ms" in cfg_path.read_text(encoding="utf-8")


def test_setup_logging_creates_session(tmp_path, restore_logging):
    cfg = ConfigManager(str(tmp_path / "config.ini"))
    session = setup_logging(cfg, "DEBUG")
    assert session.parent == tmp_path / "logs"
    assert session.name.startswith("session-")
    assert os.environ["FV_LOG_SESSION_DIR"] == str(session)
    assert logging.getLogger().level == logging.DEBUG
    logging.getLogger("framevision.test").info("hello")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello" in (session / "framevision.log").read_text(encoding="utf-8")
    assert get_artifacts_dir(cfg) == session / "artifacts"


def test_prune_keeps_latest_sessions(tmp_path):
    for i in range(5):
        d = tmp_path / f"session-2024010{i}_000000"
        d.mkdir()
        os.utime(d, (1000 + i, 1000 + i))
    prune_old_sessions(tmp_path, keep=3)
    left = sorted(p.name for p in tmp_path.iterdir())
    assert left == ["session-20240102_000000", "session-20240103_000000", "session-20240104_000000"]
