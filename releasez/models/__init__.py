# Rev 0.1.0
from .entities import BasePhaseRef, PlanPhase, PhaseFormData, BaseDraft, CustomDraft, PhaseDraft
from .types import ErrorCode, FieldError, PhaseFormErrors, FormField, ErrorField

__all__ = [
    "BasePhaseRef", "PlanPhase", "PhaseFormData", "BaseDraft", "CustomDraft", "PhaseDraft",
    "ErrorCode", "FieldError", "PhaseFormErrors", "FormField", "ErrorField",
]
