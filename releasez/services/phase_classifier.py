# Rev 0.1.0
from __future__ import annotations
from typing import Iterable, Optional

from releasez.models.entities import BasePhaseRef, PlanPhase


def is_base_phase_instance(phase: Optional[PlanPhase], base_catalog: Iterable[BasePhaseRef]) -> bool:
    """True iff `phase` (as it was when editing began) matches a catalog entry on name and color."""
    if phase is None:
        return False
    return any(bp.name == phase.name and bp.color == phase.color for bp in base_catalog)
