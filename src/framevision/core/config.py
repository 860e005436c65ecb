"""core.config
Configuration core: load/save helpers for config.ini.

This module provides a tiny ConfigManager used by the command line and the
routines to read and persist simple key/value settings. It purposely keeps a
small API: ConfigManager.load(), get(key, fallback), typed getters and save().
"""

import os
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

from ..config.vision import DEFAULT_MATCH_MODE, DEFAULT_THRESHOLD

DEFAULTS = {
    "log_level": "INFO",
    "dry_run": "False",
    "match_threshold": str(DEFAULT_THRESHOLD),
    "template_match_mode": DEFAULT_MATCH_MODE,
    "draw_on_window": "False",
    # Executable whose foreground window is the capture area (Windows only)
    "capture_executable": "",
    "slow_task_threshold_ms": "1000",
}

_TRUE = {"1", "true", "yes", "on"}


class ConfigManager:
    """Simple configuration manager backed by an INI file.

    Behaviour:
    - Uses a single DEFAULT section for lookups.
    - Fills in defaults for missing keys.
    - Defaults to a per-user config path (%APPDATA% on Windows,
      XDG_CONFIG_HOME or ~/.config on other systems) unless an explicit
      path is provided.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        if config_path:
            self.config_path = Path(config_path)
        else:
            if os.name == "nt":
                base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
                self.config_path = base.joinpath("FrameVision", "config.ini")
            else:
                base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
                self.config_path = base.joinpath("framevision", "config.ini")

        self.config = ConfigParser()
        self.load()

    def load(self) -> None:
        """Load configuration from disk and fill in missing defaults."""
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

        missing = [key for key in DEFAULTS if key not in self.config["DEFAULT"]]
        for key in missing:
            self.config["DEFAULT"][key] = DEFAULTS[key]

        # Save if we added any defaults to an existing config
        if self.config_path.exists() and missing:
            self.save()

    def get(self, key: str, fallback=None):
        """Get a configuration value.

        Precedence is env (FV_<KEY>, then <KEY>) > config.ini > fallback.
        """
        for ek in (f"FV_{str(key).upper()}", str(key).upper()):
            val = os.environ.get(ek)
            if val is not None and str(val) != "":
                return val
        return self.config["DEFAULT"].get(key, fallback)

    def get_bool(self, key: str, fallback: bool = False) -> bool:
        val = self.get(key)
        if val is None:
            return fallback
        return str(val).strip().lower() in _TRUE

    def get_float(self, key: str, fallback: float = 0.0) -> float:
        val = self.get(key)
        try:
            return float(val)
        except (TypeError, ValueError):
            return fallback

    def set(self, key: str, value) -> None:
        self.config["DEFAULT"][key] = str(value)

    def save(self) -> None:
        """Persist current configuration to disk (creates parent directories)."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as fh:
            self.config.write(fh)
