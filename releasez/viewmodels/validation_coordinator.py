# Rev 0.1.0
# releasez/viewmodels/validation_coordinator.py
from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Callable, Dict, Iterable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from releasez.utils.logging_setup import get_logger

log = get_logger("validation")


class ValidationState(str, Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    VALIDATING = "validating"


class DebouncedValidationCoordinator(QObject):
    """
    Runs field validation callbacks, delaying the debounced fields until they
    have been quiet for `delay_ms`. One single-shot QTimer per debounced field;
    restarting it drops the earlier value, so only the last edit is validated.

    `validate(field, value)` does the actual work and owns writing results.
    """

    stateChanged = Signal(str)
    validatingChanged = Signal(bool)

    def __init__(
        self,
        validate: Callable[[str, object], None],
        *,
        delay_ms: int = 300,
        debounced_fields: Iterable[str] = ("name",),
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._validate = validate
        self._delay_ms = delay_ms
        self._timers: Dict[str, QTimer] = {}
        self._pending: Dict[str, object] = {}
        self._armed: Dict[str, int] = {}
        self._generation = 0
        self._running = 0
        self._state = ValidationState.IDLE

        for field in debounced_fields:
            t = QTimer(self)
            t.setSingleShot(True)
            t.timeout.connect(partial(self._on_timeout, field))
            self._timers[field] = t

    # ---- state
    @property
    def state(self) -> ValidationState:
        return self._state

    @property
    def is_validating(self) -> bool:
        return self._state is not ValidationState.IDLE

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def is_debounced(self, field: str) -> bool:
        return field in self._timers

    def pending_value(self, field: str) -> Optional[object]:
        return self._pending.get(field)

    def has_pending(self, field: Optional[str] = None) -> bool:
        return bool(self._pending) if field is None else field in self._pending

    # ---- commands
    def schedule(self, field: str, value: object) -> None:
        timer = self._timers.get(field)
        if timer is None:
            self.run_now(field, value)
            return
        self._pending[field] = value
        self._armed[field] = self._generation
        timer.start(self._delay_ms)   # restart == cancel + reschedule
        self._refresh_state()

    def run_now(self, field: str, value: object) -> None:
        """Synchronous validation; a pending debounced call for the same field is superseded."""
        if field in self._timers:
            self._drop(field)
        self._run(field, value)

    def flush(self) -> None:
        """Fire every pending debounced call immediately."""
        for field in list(self._pending):
            value = self._pending[field]
            self._drop(field)
            self._run(field, value)
        self._refresh_state()

    def cancel(self) -> None:
        """Discard pending calls; a timeout already queued for them is ignored."""
        self._generation += 1
        for field in list(self._pending):
            self._drop(field)
        self._refresh_state()

    # ---- internals
    def _drop(self, field: str) -> None:
        self._timers[field].stop()
        self._pending.pop(field, None)
        self._armed.pop(field, None)

    def _on_timeout(self, field: str) -> None:
        if field not in self._pending or self._armed.get(field) != self._generation:
            log.debug("Discarding stale %s validation", field)
            return
        value = self._pending.pop(field)
        self._armed.pop(field, None)
        self._run(field, value)

    def _run(self, field: str, value: object) -> None:
        self._running += 1
        self._refresh_state()
        try:
            self._validate(field, value)
        finally:
            self._running -= 1
            self._refresh_state()

    def _refresh_state(self) -> None:
        if self._running:
            state = ValidationState.VALIDATING
        elif self._pending:
            state = ValidationState.SCHEDULED
        else:
            state = ValidationState.IDLE
        if state is self._state:
            return
        was_validating = self.is_validating
        self._state = state
        self.stateChanged.emit(state.value)
        if self.is_validating != was_validating:
            self.validatingChanged.emit(self.is_validating)
