# Rev 0.1.0
"""Lightweight entities for plan phases and the phase edit draft"""
from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from typing import Optional, Union


@dataclass(frozen=True)
class BasePhaseRef:
    """Entry of the global base-phase catalog. Read-only here."""
    name: str
    color: str


@dataclass(frozen=True)
class PlanPhase:
    id: str
    name: str
    startDate: Optional[str] = None    # UTC calendar date, YYYY-MM-DD
    endDate: Optional[str] = None      # UTC calendar date, YYYY-MM-DD
    color: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PhaseFormData:
    """In-progress values as typed in the dialog (local date strings)."""
    name: str = ""
    startDate: str = ""
    endDate: str = ""
    color: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class BaseDraft:
    """Draft of a base-phase instance: only the dates can change."""
    original: PlanPhase
    form: PhaseFormData
    kind: str = "base"

    @property
    def name(self) -> str:
        return self.original.name

    @property
    def color(self) -> str:
        return self.original.color or ""

    def with_dates(self, start: Optional[str] = None, end: Optional[str] = None) -> "BaseDraft":
        form = replace(
            self.form,
            startDate=self.form.startDate if start is None else start,
            endDate=self.form.endDate if end is None else end,
        )
        return replace(self, form=form)


@dataclass(frozen=True)
class CustomDraft:
    """Draft of a plan-local phase: every field is editable."""
    original: Optional[PlanPhase]
    form: PhaseFormData
    kind: str = "custom"

    def with_field(self, field: str, value: str) -> "CustomDraft":
        return replace(self, form=replace(self.form, **{field: value}))


PhaseDraft = Union[BaseDraft, CustomDraft]
