# Rev 0.1.0
# releasez/utils/config.py
from __future__ import annotations
import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import config_dir

log = logging.getLogger("releaseZ.config")

SETTINGS_FILE_NAME = "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "phase_form": {
        "name_debounce_ms": 300,
        "default_color": "#185ABD",
        "default_duration_days": 7,
        "provisional_id_prefix": "phase-",
    },
}


@dataclass(frozen=True)
class PhaseFormSettings:
    name_debounce_ms: int = 300
    default_color: str = "#185ABD"
    default_duration_days: int = 7
    provisional_id_prefix: str = "phase-"


def settings_file() -> Path:
    return config_dir() / SETTINGS_FILE_NAME


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable settings %s: %s", path, e)
            return copy.deepcopy(_DEFAULTS)
        if not isinstance(data, dict):
            log.warning("Ignoring settings %s: top level is not an object", path)
            return copy.deepcopy(_DEFAULTS)
        return _merge(_DEFAULTS, data)
    return copy.deepcopy(_DEFAULTS)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def phase_form_settings(data: Optional[Dict[str, Any]] = None) -> PhaseFormSettings:
    """Typed view over the `phase_form` section; bad values fall back to defaults."""
    section = (data if data is not None else load_settings()).get("phase_form") or {}
    defaults = PhaseFormSettings()
    try:
        debounce = int(section.get("name_debounce_ms", defaults.name_debounce_ms))
        duration = int(section.get("default_duration_days", defaults.default_duration_days))
    except (TypeError, ValueError):
        log.warning("Invalid numeric phase_form settings; using defaults")
        debounce, duration = defaults.name_debounce_ms, defaults.default_duration_days
    return PhaseFormSettings(
        name_debounce_ms=max(0, debounce),
        default_color=str(section.get("default_color") or defaults.default_color),
        default_duration_days=max(0, duration),
        provisional_id_prefix=str(section.get("provisional_id_prefix") or defaults.provisional_id_prefix),
    )
