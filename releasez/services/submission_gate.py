# Rev 0.1.0
from __future__ import annotations
from typing import Mapping, Optional

from releasez.models.entities import PhaseDraft
from releasez.models.types import DATE_ERROR_FIELDS, ERROR_FIELDS, FieldError


def is_form_valid(draft: Optional[PhaseDraft], errors: Mapping[str, FieldError], is_validating: bool) -> bool:
    if draft is None:
        return False
    form = draft.form
    if draft.kind == "base":
        # pending name checks are irrelevant: name/color are locked
        return (
            form.startDate != ""
            and form.endDate != ""
            and not any(errors.get(k) for k in DATE_ERROR_FIELDS)
        )
    return (
        form.name.strip() != ""
        and form.startDate != ""
        and form.endDate != ""
        and not any(errors.get(k) for k in ERROR_FIELDS)
        and not is_validating
    )
