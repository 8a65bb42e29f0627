# Rev 0.1.0
"""Conflict indices: colors and names already taken, excluding the phase under edit."""
from __future__ import annotations
from functools import lru_cache
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from releasez.models.entities import BasePhaseRef, PlanPhase


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


@lru_cache(maxsize=32)
def _color_index(base: Tuple[BasePhaseRef, ...], plan: Tuple[PlanPhase, ...], editing_id: Optional[str]) -> FrozenSet[str]:
    colors = {bp.color for bp in base if bp.color}
    colors.update(p.color for p in plan if p.id != editing_id and p.color)
    return frozenset(colors)


@lru_cache(maxsize=32)
def _name_index(plan: Tuple[PlanPhase, ...], editing_id: Optional[str]) -> FrozenSet[str]:
    # base-phase names are deliberately left out: names only need to be unique inside the plan
    return frozenset(normalize_name(p.name) for p in plan if p.id != editing_id and p.name)


class ConflictIndexBuilder:
    """
    Snapshot of the catalog and the plan at the time of construction.
    Build a new one when either collection changes.
    """

    def __init__(self, base_catalog: Iterable[BasePhaseRef], plan_phases: Iterable[PlanPhase], editing_id: Optional[str] = None):
        self._base: Tuple[BasePhaseRef, ...] = tuple(base_catalog)
        self._plan: Tuple[PlanPhase, ...] = tuple(plan_phases)
        self._editing_id = editing_id

    @property
    def editing_id(self) -> Optional[str]:
        return self._editing_id

    @property
    def base_catalog(self) -> Sequence[BasePhaseRef]:
        return self._base

    @property
    def plan_phases(self) -> Sequence[PlanPhase]:
        return self._plan

    def build_color_index(self) -> FrozenSet[str]:
        return _color_index(self._base, self._plan, self._editing_id)

    def build_name_index(self) -> FrozenSet[str]:
        return _name_index(self._plan, self._editing_id)
