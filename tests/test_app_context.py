# Rev 0.1.0
from __future__ import annotations

from releasez.app_context import AppContext
from releasez.models.entities import BasePhaseRef
from releasez.utils.config import save_settings


def test_create_loads_settings(tmp_path, base_catalog):
    path = tmp_path / "settings.json"
    save_settings({"phase_form": {"name_debounce_ms": 50, "default_color": "#101010"}}, path)
    ctx = AppContext.create(base_catalog, settings_path=path)
    assert ctx.settings.name_debounce_ms == 50
    assert ctx.base_catalog == tuple(base_catalog)


def test_phase_form_uses_context(qapp, tmp_path, base_catalog, plan_phases, today):
    path = tmp_path / "settings.json"
    save_settings({"phase_form": {"default_color": "#101010"}}, path)
    ctx = AppContext.create(base_catalog, settings_path=path)
    saved = []
    form = ctx.phase_form(plan_phases, on_save=saved.append, today=lambda: today)
    form.open(None)
    assert form.form_data.color == "#101010"
    assert form.coordinator.delay_ms == 300
    form.update_field("name", "Docs")
    assert form.save() is not None
    assert len(saved) == 1


def test_refresh_catalog_applies_to_new_forms(qapp, tmp_path, plan_phases):
    ctx = AppContext.create([], settings_path=tmp_path / "missing.json")
    ctx.refresh_catalog([BasePhaseRef("Dev", "#FF0000")])
    form = ctx.phase_form(plan_phases)
    form.open(plan_phases[1])
    assert form.is_base_phase is True
