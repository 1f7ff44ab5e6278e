from dataclasses import fields

import pytest

from cvss_sim.core.metrics import METRICS_BY_KEY
from cvss_sim.core.models import CVSSFactors, Severity
from cvss_sim.scoring.cvss_scorer import CVSSScorer

from .conftest import all_factor_combinations


def test_defaults_score_zero():
    result = CVSSScorer.compute(CVSSFactors())

    assert result.score == 0.0
    assert result.severity == Severity.NONE
    assert result.display_score == "0.0"


def test_full_impact_with_default_exploitability_is_critical():
    factors = CVSSFactors(confidentiality=0.56, integrity=0.56, availability=0.56)

    result = CVSSScorer.compute(factors)

    assert result.impact == pytest.approx(5.873119, abs=1e-5)
    assert result.exploitability == pytest.approx(3.887042, abs=1e-5)
    assert result.score == 9.8
    assert result.severity == Severity.CRITICAL
    assert result.color == "#ef4444"


def test_hardest_exploit_with_low_confidentiality_is_low():
    factors = CVSSFactors(
        attack_vector=0.20,
        complexity=0.44,
        privileges=0.27,
        user_interaction=0.62,
        confidentiality=0.22,
    )

    result = CVSSScorer.compute(factors)

    assert result.impact == pytest.approx(1.4124)
    assert result.exploitability == pytest.approx(0.1211, abs=1e-4)
    assert result.score == 1.6
    assert result.severity == Severity.LOW


@pytest.mark.parametrize("changes, expected_score, expected_severity", [
    ({"confidentiality": 0.56}, 7.5, Severity.HIGH),
    ({"confidentiality": 0.22}, 5.3, Severity.MEDIUM),
    ({"confidentiality": 0.56, "attack_vector": 0.20}, 4.6, Severity.MEDIUM),
])
def test_single_edits(changes, expected_score, expected_severity):
    result = CVSSScorer.compute(CVSSFactors().replace(**changes))

    assert result.score == expected_score
    assert result.severity == expected_severity


def test_score_stays_within_bounds():
    for factors in all_factor_combinations():
        result = CVSSScorer.compute(factors)
        assert 0.0 <= result.score <= 10.0


def test_no_impact_means_no_score_for_any_exploitability():
    for factors in all_factor_combinations():
        if factors.confidentiality or factors.integrity or factors.availability:
            continue
        result = CVSSScorer.compute(factors)
        assert result.score == 0.0
        assert result.severity == Severity.NONE


def test_score_is_monotonic_in_each_factor():
    combinations = list(all_factor_combinations())

    for factors in combinations:
        base_score = CVSSScorer.compute(factors).score
        for field in fields(factors):
            current = getattr(factors, field.name)
            for option in METRICS_BY_KEY[field.name].options:
                if option.weight <= current:
                    continue
                raised = factors.replace(**{field.name: option.weight})
                assert CVSSScorer.compute(raised).score >= base_score, (factors, field.name)


def test_compute_does_not_validate_out_of_table_weights():
    result = CVSSScorer.compute(CVSSFactors(confidentiality=0.9, integrity=0.9, availability=0.9))

    assert result.score == 10.0
    assert result.severity == Severity.CRITICAL


@pytest.mark.parametrize("raw, expected", [
    (0.0, 0.0),
    (6.41, 6.5),
    (1.01, 1.1),
    (9.76016, 9.8),
    (10.0, 10.0),
])
def test_round_up_never_rounds_down(raw, expected):
    assert CVSSScorer.round_up(raw) == expected


@pytest.mark.parametrize("score, expected", [
    (0.0, Severity.NONE),
    (0.1, Severity.LOW),
    (3.9, Severity.LOW),
    (4.0, Severity.MEDIUM),
    (6.9, Severity.MEDIUM),
    (7.0, Severity.HIGH),
    (8.9, Severity.HIGH),
    (9.0, Severity.CRITICAL),
    (10.0, Severity.CRITICAL),
])
def test_severity_boundaries(score, expected):
    assert CVSSScorer.calculate_severity(score) == expected


@pytest.mark.parametrize("changes, boundary, expected_severity", [
    # raw 3.9513 rounds up to 4.0
    ({"attack_vector": 0.55, "complexity": 0.44, "confidentiality": 0.22, "integrity": 0.22},
     4.0, Severity.MEDIUM),
    # raw 6.9590 rounds up to 7.0
    ({"attack_vector": 0.62, "privileges": 0.62, "user_interaction": 0.62,
      "confidentiality": 0.22, "integrity": 0.56, "availability": 0.56},
     7.0, Severity.HIGH),
])
def test_compute_classifies_on_rounded_score(changes, boundary, expected_severity):
    result = CVSSScorer.compute(CVSSFactors().replace(**changes))

    assert result.impact + result.exploitability < boundary
    assert CVSSScorer.calculate_severity(result.impact + result.exploitability) != expected_severity
    assert result.score == boundary
    assert result.severity == expected_severity
