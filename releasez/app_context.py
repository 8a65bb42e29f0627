# releaseZ application context
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional

from .models.entities import BasePhaseRef, PlanPhase
from .utils.config import PhaseFormSettings, load_settings, phase_form_settings
from .utils.logging_setup import get_logger
from .viewmodels.phase_form_viewmodel import PhaseFormController


@dataclass
class AppContext:
    """Central container for shared resources of the phase editor."""
    settings: PhaseFormSettings
    base_catalog: tuple[BasePhaseRef, ...] = field(default_factory=tuple)
    settings_path: Optional[Path] = None

    @classmethod
    def create(cls, base_catalog: Iterable[BasePhaseRef] = (), settings_path: Optional[Path] = None) -> "AppContext":
        """Load settings and keep the catalog snapshot."""
        log = get_logger("AppContext")
        settings = phase_form_settings(load_settings(settings_path))
        ctx = cls(settings=settings, base_catalog=tuple(base_catalog), settings_path=settings_path)
        log.info("AppContext initialized with %d base phase(s), debounce=%dms",
                 len(ctx.base_catalog), settings.name_debounce_ms)
        return ctx

    def refresh_catalog(self, base_catalog: Iterable[BasePhaseRef]) -> None:
        self.base_catalog = tuple(base_catalog)

    def phase_form(
        self,
        plan_phases: Iterable[PlanPhase] = (),
        *,
        on_save: Optional[Callable[[PlanPhase], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        today: Optional[Callable[[], str]] = None,
    ) -> PhaseFormController:
        return PhaseFormController(
            self.base_catalog,
            plan_phases,
            on_save=on_save,
            on_cancel=on_cancel,
            settings=self.settings,
            today=today,
        )
