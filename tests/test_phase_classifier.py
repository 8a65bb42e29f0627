# Rev 0.1.0
from __future__ import annotations

from releasez.models.entities import PlanPhase
from releasez.services.phase_classifier import is_base_phase_instance


def test_name_and_color_must_both_match(base_catalog):
    assert is_base_phase_instance(PlanPhase("p", "QA", color="#185ABD"), base_catalog) is True
    assert is_base_phase_instance(PlanPhase("p", "QA", color="#000000"), base_catalog) is False
    assert is_base_phase_instance(PlanPhase("p", "Other", color="#185ABD"), base_catalog) is False


def test_match_is_exact(base_catalog):
    assert is_base_phase_instance(PlanPhase("p", "qa", color="#185ABD"), base_catalog) is False
    assert is_base_phase_instance(PlanPhase("p", "QA", color="#185abd"), base_catalog) is False


def test_new_phase_is_never_base(base_catalog):
    assert is_base_phase_instance(None, base_catalog) is False


def test_classification_is_stable(base_catalog):
    phase = PlanPhase("p", "Release", color="#C62828")
    assert is_base_phase_instance(phase, base_catalog) == is_base_phase_instance(phase, base_catalog)
