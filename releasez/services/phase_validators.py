# Rev 0.1.0
"""
Field validators for the phase edit form.

Every validator is pure: it returns the errors for the key(s) it owns,
with None for a key that is currently valid, so callers can apply the
result as a full replacement of those keys.
"""
from __future__ import annotations
from typing import AbstractSet, Dict, Optional

from releasez.models.entities import PhaseFormData, PhaseDraft
from releasez.models.types import ErrorCode, FieldError
from releasez.services.conflict_index import ConflictIndexBuilder, normalize_name
from releasez.utils.dates import parse_date

ErrorPatch = Dict[str, Optional[FieldError]]


def validate_name(trimmed_name: str, name_index: AbstractSet[str]) -> Optional[FieldError]:
    trimmed_name = (trimmed_name or "").strip()
    if not trimmed_name:
        return FieldError.of("name", ErrorCode.REQUIRED)
    if normalize_name(trimmed_name) in name_index:
        return FieldError.of("name", ErrorCode.DUPLICATE_NAME)
    return None


def validate_color(color: str, color_index: AbstractSet[str]) -> Optional[FieldError]:
    if color in color_index:
        return FieldError.of("color", ErrorCode.DUPLICATE_COLOR)
    return None


def validate_dates(start_date: str, end_date: str) -> ErrorPatch:
    """Owns startDate, endDate and dateRange; more than one may fail at once."""
    out: ErrorPatch = {"startDate": None, "endDate": None, "dateRange": None}
    start = (start_date or "").strip()
    end = (end_date or "").strip()

    if not start:
        out["startDate"] = FieldError.of("startDate", ErrorCode.REQUIRED)
    elif parse_date(start) is None:
        out["startDate"] = FieldError.of("startDate", ErrorCode.INVALID_DATE)

    if not end:
        out["endDate"] = FieldError.of("endDate", ErrorCode.REQUIRED)
    elif parse_date(end) is None:
        out["endDate"] = FieldError.of("endDate", ErrorCode.INVALID_DATE)

    # YYYY-MM-DD compares correctly as text; skipped when either side is malformed
    if start and end and not (out["startDate"] or out["endDate"]) and end < start:
        out["dateRange"] = FieldError.of("dateRange", ErrorCode.END_BEFORE_START)
    return out


def validate_base_phase(form: PhaseFormData) -> ErrorPatch:
    return validate_dates(form.startDate, form.endDate)


def validate_local_phase(form: PhaseFormData, indices: ConflictIndexBuilder) -> ErrorPatch:
    patch: ErrorPatch = {
        "name": validate_name(form.name.strip(), indices.build_name_index()),
        "color": validate_color(form.color, indices.build_color_index()),
    }
    patch.update(validate_dates(form.startDate, form.endDate))
    return patch


def validate_draft(draft: PhaseDraft, indices: ConflictIndexBuilder) -> ErrorPatch:
    """Full validation, dispatched on the draft kind."""
    if draft.kind == "base":
        return validate_base_phase(draft.form)
    if draft.kind == "custom":
        return validate_local_phase(draft.form, indices)
    raise ValueError(f"unknown draft kind: {draft.kind!r}")


def has_errors(patch: ErrorPatch) -> bool:
    return any(v is not None for v in patch.values())
