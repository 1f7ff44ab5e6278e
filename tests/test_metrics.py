import pytest

from cvss_sim.core.metrics import (
    ATTACK_VECTOR, CONFIDENTIALITY, EXPLOITABILITY_METRICS, IMPACT_METRICS, METRICS,
    InvalidFactorError, describe_factors, factors_from_codes, get_metric, validate_factors,
)
from cvss_sim.core.models import CVSSFactors


def test_tables_cover_every_factor_field():
    assert [metric.key for metric in METRICS] == list(CVSSFactors.__dataclass_fields__)
    assert len(EXPLOITABILITY_METRICS) == 4
    assert len(IMPACT_METRICS) == 3


def test_default_factors_are_the_first_exploitability_options_and_no_impact():
    assert describe_factors(CVSSFactors()) == {
        'AV': 'Network', 'AC': 'Low', 'PR': 'None', 'UI': 'None',
        'C': 'None', 'I': 'None', 'A': 'None',
    }


def test_get_metric_accepts_key_and_code():
    assert get_metric('attack_vector') is ATTACK_VECTOR
    assert get_metric('av') is ATTACK_VECTOR
    assert get_metric('C') is CONFIDENTIALITY

    with pytest.raises(InvalidFactorError):
        get_metric('ZZ')


def test_option_lookup():
    assert ATTACK_VECTOR.option_for_code('p').weight == 0.20
    assert ATTACK_VECTOR.option_for_weight(0.62).label == 'Adjacent'
    assert ATTACK_VECTOR.option_for_weight(0.5) is None

    with pytest.raises(InvalidFactorError, match="expected one of N, A, L, P"):
        ATTACK_VECTOR.option_for_code('X')


def test_risk_ratio():
    assert ATTACK_VECTOR.risk_ratio(0.85) == 1.0
    assert ATTACK_VECTOR.risk_ratio(0.20) == pytest.approx(0.20 / 0.85)
    assert CONFIDENTIALITY.risk_ratio(0.0) == 0.0


def test_factors_from_codes_builds_from_defaults():
    factors = factors_from_codes({'AV': 'L', 'C': 'H', 'i': 'l'})

    assert factors == CVSSFactors(attack_vector=0.55, confidentiality=0.56, integrity=0.22)


def test_factors_from_codes_edits_a_base():
    base = CVSSFactors(confidentiality=0.56)

    edited = factors_from_codes({'UI': 'R'}, base=base)

    assert edited.confidentiality == 0.56
    assert edited.user_interaction == 0.62
    assert base.user_interaction == 0.85


def test_factors_from_codes_rejects_unknown_values():
    with pytest.raises(InvalidFactorError):
        factors_from_codes({'AC': 'M'})


def test_validate_factors():
    assert validate_factors(CVSSFactors()) == []

    issues = validate_factors(CVSSFactors(attack_vector=0.5, availability=1.0))

    assert len(issues) == 2
    assert issues[0].startswith('AV weight 0.5')
    assert issues[1].startswith('A weight 1.0')


def test_describe_factors_marks_custom_weights():
    assert describe_factors(CVSSFactors(privileges=0.3))['PR'] == 'Custom'
