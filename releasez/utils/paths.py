# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Uses XDG Base Directory spec
- Settings under $XDG_CONFIG_HOME/releaseZ, logs under $XDG_STATE_HOME/releaseZ/logs
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "releaseZ"


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def xdg_state_home() -> Path:
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


def config_dir(app: str = APP_NAME) -> Path:
    return xdg_config_home() / app


def logs_dir(app: str = APP_NAME) -> Path:
    return xdg_state_home() / app / "logs"
