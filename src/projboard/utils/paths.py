# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Uses XDG Base Directory spec
- Logs under XDG_STATE_HOME, settings under XDG_CONFIG_HOME
- Projects themselves are never written to disk
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "projboard"


def xdg_state_home() -> Path:
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def logs_dir() -> Path:
    d = xdg_state_home() / APP_NAME / "logs"
    d.mkdir(parents=True, exist_ok=True)
    return d


def config_dir() -> Path:
    d = xdg_config_home() / APP_NAME
    d.mkdir(parents=True, exist_ok=True)
    return d
