import pytest

from src.risk_engine.classifier import (
    RiskLevel,
    classify,
    clinical_bonus,
    round_half_up,
    to_percentage,
)
from src.risk_engine.clinical_factors import analyze_clinical_factors


def test_round_half_up():
    assert round_half_up(42.5) == 43
    assert round_half_up(69.6685) == 70
    assert round_half_up(12.49) == 12


@pytest.mark.parametrize("raw,expected", [(0.0, 5), (0.03, 5), (0.5, 50), (0.99, 95), (1.5, 95)])
def test_percentage_is_clamped(raw, expected):
    assert to_percentage(raw) == expected


@pytest.mark.parametrize("percentage,level", [
    (5, RiskLevel.LOW), (39, RiskLevel.LOW), (40, RiskLevel.MEDIUM),
    (69, RiskLevel.MEDIUM), (70, RiskLevel.HIGH), (95, RiskLevel.HIGH),
])
def test_risk_level_buckets(percentage, level):
    assert RiskLevel.from_percentage(percentage) is level


def test_no_findings_no_bonus(make_inputs):
    findings = analyze_clinical_factors(make_inputs())
    assert clinical_bonus(findings) == 0
    result = classify(0.45, findings)
    assert result.risk_percentage == result.adjusted_percentage == 45
    assert result.risk_level is RiskLevel.MEDIUM


def test_overlay_bumps_level_but_not_reported_percentage(make_inputs):
    findings = analyze_clinical_factors(make_inputs(glucose=130, bmi=31, age=50))
    assert clinical_bonus(findings) == 15

    result = classify(0.561, findings)
    assert result.risk_percentage == 56
    assert result.adjusted_percentage == 71
    assert result.risk_level is RiskLevel.HIGH

    plain = classify(0.561, findings, overlay=False)
    assert plain.adjusted_percentage == 56
    assert plain.risk_level is RiskLevel.MEDIUM


def test_bonus_applied_before_clamp(make_inputs):
    findings = analyze_clinical_factors(make_inputs(glucose=200, bmi=40, age=70))
    result = classify(0.94, findings)
    assert result.risk_percentage == 94
    assert result.adjusted_percentage == 95
