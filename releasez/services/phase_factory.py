# Rev 0.1.0
"""Building plan phases: provisional ids, catalog picks, default colors."""
from __future__ import annotations
import itertools
import time
from typing import AbstractSet, Iterable, List, Optional, Sequence

from releasez.models.entities import BasePhaseRef, PlanPhase
from releasez.utils.config import PhaseFormSettings
from releasez.utils.dates import add_days, local_to_utc, today_utc
from releasez.utils.logging_setup import get_logger

log = get_logger("phase_factory")

DEFAULT_PALETTE: tuple[str, ...] = (
    "#185ABD", "#2E7D32", "#C62828", "#EF6C00", "#6A1B9A",
    "#00838F", "#AD1457", "#4E342E", "#F9A825", "#37474F",
)

_seq = itertools.count(1)


def new_provisional_id(prefix: str = "phase-", suffix: Optional[str] = None) -> str:
    """`<prefix><ms timestamp>-<seq>[-suffix]`; unique within the process."""
    ident = f"{prefix}{int(time.time() * 1000)}-{next(_seq)}"
    return f"{ident}-{suffix}" if suffix else ident


def is_provisional(phase_id: Optional[str], prefix: str = "phase-") -> bool:
    return bool(phase_id) and phase_id.startswith(prefix)


def suggest_color(palette: Iterable[str], used_colors: AbstractSet[str]) -> Optional[str]:
    return next((c for c in palette if c not in used_colors), None)


def default_span(start: Optional[str] = None, *, today: Optional[str] = None, days: int = 7) -> tuple[str, str]:
    begin = local_to_utc(start) if start else None
    begin = begin or today or today_utc()
    return begin, add_days(begin, days)


def phases_from_catalog(
    selected: Sequence[BasePhaseRef],
    *,
    plan_phases: Sequence[PlanPhase] = (),
    plan_start: Optional[str] = None,
    today: Optional[str] = None,
    settings: Optional[PhaseFormSettings] = None,
) -> List[PlanPhase]:
    """
    One plan phase per selected base phase, each spanning the default duration
    from the plan start (or today). Entries the plan already holds are skipped.
    """
    settings = settings or PhaseFormSettings()
    present = {(p.name, p.color) for p in plan_phases}
    start, end = default_span(plan_start, today=today, days=settings.default_duration_days)

    out: List[PlanPhase] = []
    for index, bp in enumerate(selected):
        if (bp.name, bp.color) in present:
            log.debug("Skipping base phase %r: already in plan", bp.name)
            continue
        present.add((bp.name, bp.color))
        out.append(PlanPhase(
            id=new_provisional_id(settings.provisional_id_prefix, str(index)),
            name=bp.name,
            startDate=start,
            endDate=end,
            color=bp.color,
        ))
    log.info("Built %d phase(s) from %d catalog selection(s)", len(out), len(selected))
    return out
