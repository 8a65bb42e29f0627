# Rev 0.1.0
from __future__ import annotations

import pytest

from releasez.models.entities import BaseDraft, CustomDraft, PhaseFormData, PlanPhase
from releasez.models.types import ErrorCode
from releasez.services.conflict_index import ConflictIndexBuilder
from releasez.services.phase_validators import (
    has_errors, validate_color, validate_dates, validate_draft, validate_name,
)


def _codes(patch):
    return {k: v.code for k, v in patch.items() if v is not None}


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_name_required(name):
    err = validate_name(name, frozenset())
    assert err.code is ErrorCode.REQUIRED
    assert err.message == "Phase name is required"


def test_name_duplicate_is_case_and_space_insensitive():
    assert validate_name("DEV", frozenset({"dev"})).code is ErrorCode.DUPLICATE_NAME
    assert validate_name("  dev ", frozenset({"dev"})).code is ErrorCode.DUPLICATE_NAME
    assert validate_name("Dev 2", frozenset({"dev"})) is None


def test_color_duplicate():
    err = validate_color("#FF0000", frozenset({"#FF0000"}))
    assert err.code is ErrorCode.DUPLICATE_COLOR
    assert validate_color("#00FF00", frozenset({"#FF0000"})) is None


def test_dates_each_key_independent():
    assert _codes(validate_dates("", "")) == {
        "startDate": ErrorCode.REQUIRED, "endDate": ErrorCode.REQUIRED,
    }
    assert _codes(validate_dates("2025-01-05", "2025-01-01")) == {"dateRange": ErrorCode.END_BEFORE_START}
    assert _codes(validate_dates("2025-01-05", "2025-01-05")) == {}
    assert _codes(validate_dates("", "2025-01-05")) == {"startDate": ErrorCode.REQUIRED}


def test_dates_patch_owns_all_three_keys():
    patch = validate_dates("2025-01-01", "2025-01-02")
    assert set(patch) == {"startDate", "endDate", "dateRange"}
    assert not has_errors(patch)


def test_invalid_date_strings():
    assert _codes(validate_dates("2025-02-30", "2025-03-01")) == {"startDate": ErrorCode.INVALID_DATE}
    assert _codes(validate_dates("2025-03-01", "03/05/2025")) == {"endDate": ErrorCode.INVALID_DATE}


def test_base_draft_only_checks_dates(base_catalog, plan_phases):
    original = plan_phases[0]
    # name/color clash on purpose; base drafts never look at them
    draft = BaseDraft(original, PhaseFormData("Dev", "2025-01-02", "2025-01-01", "#FF0000"))
    idx = ConflictIndexBuilder(base_catalog, plan_phases, original.id)
    patch = validate_draft(draft, idx)
    assert set(patch) == {"startDate", "endDate", "dateRange"}
    assert _codes(patch) == {"dateRange": ErrorCode.END_BEFORE_START}


def test_custom_draft_checks_everything(base_catalog, plan_phases):
    draft = CustomDraft(None, PhaseFormData("dev", "2025-01-02", "2025-01-01", "#2E7D32"))
    idx = ConflictIndexBuilder(base_catalog, plan_phases, None)
    assert _codes(validate_draft(draft, idx)) == {
        "name": ErrorCode.DUPLICATE_NAME,
        "color": ErrorCode.DUPLICATE_COLOR,
        "dateRange": ErrorCode.END_BEFORE_START,
    }


def test_custom_phase_may_reuse_a_base_phase_name(base_catalog):
    plan = [PlanPhase("p-9", "Build", color="#123456")]
    draft = CustomDraft(None, PhaseFormData("Release", "2025-01-01", "2025-01-02", "#ABCDEF"))
    idx = ConflictIndexBuilder(base_catalog, plan, None)
    assert not has_errors(validate_draft(draft, idx))
