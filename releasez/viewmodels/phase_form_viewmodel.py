# Rev 0.1.0
# releaseZ – phase edit form: draft state, debounced checks, save gate
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from PySide6.QtCore import QObject, Signal

from releasez.models.entities import BaseDraft, BasePhaseRef, CustomDraft, PhaseDraft, PhaseFormData, PlanPhase
from releasez.models.types import ErrorCode, FieldError, FORM_FIELDS, PhaseFormErrors
from releasez.services.conflict_index import ConflictIndexBuilder
from releasez.services.phase_classifier import is_base_phase_instance
from releasez.services.phase_factory import new_provisional_id
from releasez.services.phase_validators import (
    ErrorPatch, validate_color, validate_dates, validate_draft, validate_name, has_errors,
)
from releasez.services.submission_gate import is_form_valid
from releasez.utils.config import PhaseFormSettings
from releasez.utils.dates import add_days, local_to_utc, today_utc, utc_to_local
from releasez.utils.logging_setup import get_logger
from releasez.viewmodels.validation_coordinator import DebouncedValidationCoordinator

log = get_logger("phase_form")

LOCKED_BASE_FIELDS = ("name", "color")


class NoActiveSessionError(RuntimeError):
    pass


class ReadOnlyFieldError(ValueError):
    pass


class PhaseFormController(QObject):
    """
    Owns the draft of one phase edit session (open → save/cancel → close).

    Name edits are validated after a quiet period, color and date edits right
    away. Nothing is validated until the first edit, so a freshly opened form
    shows no errors. `save()` re-validates synchronously and only then emits
    the finished PlanPhase.
    """

    draftChanged = Signal(dict)
    errorsChanged = Signal(dict)
    validityChanged = Signal(bool)
    validatingChanged = Signal(bool)
    phaseSaved = Signal(object)
    cancelled = Signal()
    closed = Signal()

    def __init__(
        self,
        base_catalog: Iterable[BasePhaseRef] = (),
        plan_phases: Iterable[PlanPhase] = (),
        *,
        on_save: Optional[Callable[[PlanPhase], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        settings: Optional[PhaseFormSettings] = None,
        today: Optional[Callable[[], str]] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._settings = settings or PhaseFormSettings()
        self._today = today or today_utc
        self._base: tuple[BasePhaseRef, ...] = tuple(base_catalog)
        self._plan: tuple[PlanPhase, ...] = tuple(plan_phases)

        self._draft: Optional[PhaseDraft] = None
        self._errors: PhaseFormErrors = {}
        self._indices = ConflictIndexBuilder(self._base, self._plan, None)
        self._has_interacted = False
        self._touched: set[str] = set()
        self._valid = False

        self._coordinator = DebouncedValidationCoordinator(
            self._run_validation,
            delay_ms=self._settings.name_debounce_ms,
            debounced_fields=("name",),
            parent=self,
        )
        self._coordinator.validatingChanged.connect(self._on_validating_changed)

        if on_save is not None:
            self.phaseSaved.connect(on_save)
        if on_cancel is not None:
            self.cancelled.connect(on_cancel)

    # ---- read-only state
    @property
    def draft(self) -> Optional[PhaseDraft]:
        return self._draft

    @property
    def form_data(self) -> Optional[PhaseFormData]:
        if self._draft is None:
            return None
        return PhaseFormData(**self._draft.form.to_dict())

    @property
    def errors(self) -> PhaseFormErrors:
        return dict(self._errors)

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def is_base_phase(self) -> bool:
        return isinstance(self._draft, BaseDraft)

    @property
    def read_only_fields(self) -> tuple[str, ...]:
        return LOCKED_BASE_FIELDS if self.is_base_phase else ()

    @property
    def has_interacted(self) -> bool:
        return self._has_interacted

    @property
    def is_validating(self) -> bool:
        return self._coordinator.is_validating

    @property
    def is_valid(self) -> bool:
        return is_form_valid(self._draft, self._errors, self.is_validating)

    @property
    def coordinator(self) -> DebouncedValidationCoordinator:
        return self._coordinator

    # ---- session lifecycle
    def open(self, phase: Optional[PlanPhase] = None) -> PhaseDraft:
        """Start a session for `phase`, or for a new phase when None."""
        self._coordinator.cancel()
        self._errors = {}
        self._has_interacted = False
        self._touched = set()
        self._indices = ConflictIndexBuilder(self._base, self._plan, phase.id if phase else None)

        if phase is None:
            today = self._today()
            form = PhaseFormData(
                name="",
                startDate=utc_to_local(today),
                endDate=utc_to_local(add_days(today, self._settings.default_duration_days)),
                color=self._settings.default_color,
            )
            self._draft = CustomDraft(original=None, form=form)
        else:
            form = PhaseFormData(
                name=phase.name or "",
                startDate=utc_to_local(phase.startDate),
                endDate=utc_to_local(phase.endDate),
                color=phase.color or self._settings.default_color,
            )
            # classified once; later name/color edits never change the mode
            if is_base_phase_instance(phase, self._base):
                self._draft = BaseDraft(original=phase, form=form)
            else:
                self._draft = CustomDraft(original=phase, form=form)

        log.info("Phase form opened (%s, id=%s)", self._draft.kind, phase.id if phase else None)
        self.draftChanged.emit(self._draft.form.to_dict())
        self.errorsChanged.emit({})
        self._refresh_validity(force=True)
        return self._draft

    def close(self) -> None:
        self._coordinator.cancel()
        if self._draft is None:
            return
        self._draft = None
        self._errors = {}
        self._touched = set()
        self._has_interacted = False
        self._refresh_validity()
        log.debug("Phase form closed")
        self.closed.emit()

    def cancel(self) -> None:
        """Abandon the session; safe mid-debounce and when nothing is open."""
        self._coordinator.cancel()
        if self._draft is None:
            return
        log.info("Phase edit cancelled")
        self.cancelled.emit()
        self.close()

    def set_catalog(
        self,
        base_catalog: Optional[Iterable[BasePhaseRef]] = None,
        plan_phases: Optional[Iterable[PlanPhase]] = None,
    ) -> None:
        """Swap in fresh snapshots; touched fields are re-checked against them."""
        if base_catalog is not None:
            self._base = tuple(base_catalog)
        if plan_phases is not None:
            self._plan = tuple(plan_phases)
        self._indices = ConflictIndexBuilder(self._base, self._plan, self._indices.editing_id)
        if self._draft is None or not self._has_interacted:
            return
        for field in ("name", "color", "dates"):
            if field in self._touched and not self._coordinator.has_pending(field):
                self._coordinator.run_now(field, self._value_for(field))
        self._refresh_validity()

    # ---- editing
    def update_field(self, field: str, value: str) -> None:
        draft = self._require_draft()
        if field not in FORM_FIELDS:
            raise ValueError(f"unknown phase field: {field!r}")
        value = value or ""

        if isinstance(draft, BaseDraft):
            if field in LOCKED_BASE_FIELDS:
                raise ReadOnlyFieldError(f"{field} is read-only for base phase {draft.name!r}")
            self._draft = draft.with_dates(
                start=value if field == "startDate" else None,
                end=value if field == "endDate" else None,
            )
        else:
            self._draft = draft.with_field(field, value)

        self._has_interacted = True
        self.draftChanged.emit(self._draft.form.to_dict())

        form = self._draft.form
        if field == "name":
            self._touched.add("name")
            self._coordinator.schedule("name", value)
        elif field == "color":
            self._touched.add("color")
            self._coordinator.run_now("color", value)
        elif form.startDate or form.endDate:
            self._touched.add("dates")
            self._coordinator.run_now("dates", (form.startDate, form.endDate))

        # the seeded color may already be taken; check it on the first edit of any field
        if isinstance(self._draft, CustomDraft) and "color" not in self._touched:
            self._touched.add("color")
            self._coordinator.run_now("color", form.color)
        self._refresh_validity()

    def validate_now(self) -> bool:
        """Full validation for the draft's kind, ignoring any debounce window."""
        draft = self._require_draft()
        self._coordinator.cancel()
        patch = validate_draft(draft, self._indices)
        self._apply(patch)
        self._refresh_validity()
        return not has_errors(patch)

    def save(self) -> Optional[PlanPhase]:
        """Validate, normalize and emit the phase. Returns None when rejected."""
        draft = self._require_draft()
        self._has_interacted = True
        if not self.validate_now():
            log.info("Save rejected: %s", ", ".join(sorted(self._errors)))
            return None

        form = draft.form
        start_utc = local_to_utc(form.startDate)
        end_utc = local_to_utc(form.endDate)
        if start_utc is None or end_utc is None:
            self._apply({
                "startDate": None if start_utc else FieldError.of("startDate", ErrorCode.INVALID_DATE),
                "endDate": None if end_utc else FieldError.of("endDate", ErrorCode.INVALID_DATE),
            })
            self._refresh_validity()
            log.info("Save rejected: dates could not be normalized")
            return None

        if isinstance(draft, BaseDraft):
            # name/color always come back from the catalog entry, never the draft
            phase = PlanPhase(
                id=draft.original.id,
                name=draft.original.name,
                startDate=start_utc,
                endDate=end_utc,
                color=draft.original.color,
            )
        else:
            original = draft.original
            phase = PlanPhase(
                id=original.id if original else new_provisional_id(self._settings.provisional_id_prefix),
                name=form.name.strip(),
                startDate=start_utc,
                endDate=end_utc,
                color=form.color,
            )

        missing = {
            k: FieldError.of(k, ErrorCode.REQUIRED)
            for k, v in (("name", phase.name), ("startDate", phase.startDate), ("endDate", phase.endDate))
            if not v
        }
        if missing:
            self._apply(missing)
            self._refresh_validity()
            log.warning("Save rejected: built phase is missing %s", ", ".join(sorted(missing)))
            return None

        log.info("Phase saved (id=%s, name=%r)", phase.id, phase.name)
        self.phaseSaved.emit(phase)
        self.close()
        return phase

    # ---- internals
    def _require_draft(self) -> PhaseDraft:
        if self._draft is None:
            raise NoActiveSessionError("no phase edit session is open")
        return self._draft

    def _value_for(self, field: str) -> object:
        form = self._draft.form
        if field == "dates":
            return (form.startDate, form.endDate)
        return getattr(form, field)

    def _run_validation(self, field: str, value: object) -> None:
        # Called by the coordinator, synchronously or when the name timer fires
        draft = self._draft
        if draft is None:
            log.debug("Dropping %s validation: no open session", field)
            return
        patch: ErrorPatch
        if field == "dates":
            start, end = value
            patch = validate_dates(start, end)
        elif draft.kind == "base":
            return
        elif field == "name":
            patch = {"name": validate_name(str(value).strip(), self._indices.build_name_index())}
        elif field == "color":
            patch = {"color": validate_color(str(value), self._indices.build_color_index())}
        else:
            raise ValueError(f"unknown validation target: {field!r}")
        self._apply(patch)

    def _apply(self, patch: ErrorPatch) -> None:
        before = dict(self._errors)
        for key, err in patch.items():
            if err is None:
                self._errors.pop(key, None)
            else:
                self._errors[key] = err
        if self._errors != before:
            self.errorsChanged.emit(self._error_messages())

    def _error_messages(self) -> Dict[str, str]:
        return {k: v.message for k, v in self._errors.items()}

    def _on_validating_changed(self, validating: bool) -> None:
        self.validatingChanged.emit(validating)
        self._refresh_validity()

    def _refresh_validity(self, force: bool = False) -> None:
        valid = self.is_valid
        if force or valid != self._valid:
            self._valid = valid
            self.validityChanged.emit(valid)


PhaseFormViewModel = PhaseFormController
