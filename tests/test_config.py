# Rev 0.1.0
from __future__ import annotations

import json

from releasez.utils import config
from releasez.utils.config import PhaseFormSettings, load_settings, phase_form_settings, save_settings


def test_defaults_when_missing(tmp_path):
    data = load_settings(tmp_path / "nope.json")
    assert phase_form_settings(data) == PhaseFormSettings()


def test_partial_file_merges_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    save_settings({"phase_form": {"name_debounce_ms": 120}}, path)
    cfg = phase_form_settings(load_settings(path))
    assert cfg.name_debounce_ms == 120
    assert cfg.default_color == "#185ABD"
    assert cfg.default_duration_days == 7


def test_malformed_file_falls_back(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level("WARNING"):
        data = load_settings(path)
    assert phase_form_settings(data) == PhaseFormSettings()
    assert "Ignoring unreadable settings" in caplog.text


def test_bad_numbers_fall_back():
    cfg = phase_form_settings({"phase_form": {"name_debounce_ms": "soon", "default_color": "#000000"}})
    assert cfg.name_debounce_ms == 300
    assert cfg.default_color == "#000000"


def test_default_location_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    save_settings({"phase_form": {"provisional_id_prefix": "tmp-"}})
    written = tmp_path / "releaseZ" / "settings.json"
    assert json.loads(written.read_text()) == {"phase_form": {"provisional_id_prefix": "tmp-"}}
    assert config.settings_file() == written
    assert phase_form_settings().provisional_id_prefix == "tmp-"
