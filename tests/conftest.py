# Rev 0.1.0

"""Pytest fixtures for releaseZ (Rev 0.1.0)"""
from __future__ import annotations
import pytest

from PySide6.QtCore import QCoreApplication, QEventLoop, QTimer

from releasez.models.entities import BasePhaseRef, PlanPhase
from releasez.utils.config import PhaseFormSettings

TODAY = "2025-03-10"


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def _spin(ms: int) -> None:
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


@pytest.fixture()
def wait_ms(qapp):
    """Spin the Qt event loop for `ms` milliseconds so timers can fire."""
    return _spin


@pytest.fixture()
def today() -> str:
    return TODAY


@pytest.fixture()
def base_catalog() -> list[BasePhaseRef]:
    return [
        BasePhaseRef("QA", "#185ABD"),
        BasePhaseRef("Development", "#2E7D32"),
        BasePhaseRef("Release", "#C62828"),
    ]


@pytest.fixture()
def plan_phases() -> list[PlanPhase]:
    return [
        PlanPhase("p-1", "QA", "2025-01-01", "2025-01-05", "#185ABD"),
        PlanPhase("p-2", "Dev", "2025-01-06", "2025-01-20", "#FF0000"),
        PlanPhase("p-3", "Hardening", "2025-01-21", "2025-01-28", "#00AA00"),
    ]


@pytest.fixture()
def settings() -> PhaseFormSettings:
    return PhaseFormSettings()


@pytest.fixture()
def fast_settings() -> PhaseFormSettings:
    return PhaseFormSettings(name_debounce_ms=30)
