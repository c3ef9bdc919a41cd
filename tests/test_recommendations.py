from src.risk_engine.classifier import RiskLevel
from src.risk_engine.recommendations import (
    RECOMMENDATION_RULES,
    generate_follow_up_plan,
    generate_recommendations,
)


def categories(recs):
    return [c.category for c in recs]


def test_each_level_gets_its_tier_category(make_inputs):
    inputs = make_inputs()
    assert categories(generate_recommendations(inputs, RiskLevel.HIGH)) == ["Immediate Actions"]
    assert categories(generate_recommendations(inputs, RiskLevel.MEDIUM)) == ["Preventive Measures"]
    assert categories(generate_recommendations(inputs, RiskLevel.LOW)) == ["Maintenance"]


def test_high_risk_items_in_order(make_inputs):
    recs = generate_recommendations(make_inputs(), RiskLevel.HIGH)
    assert recs[0].items == (
        "Schedule appointment with endocrinologist within 2 weeks",
        "Order comprehensive metabolic panel including HbA1c",
        "Begin diabetes self-monitoring education",
        "Consider pharmacological intervention",
    )


def test_threshold_categories_are_appended_after_tier(make_inputs):
    recs = generate_recommendations(make_inputs(bmi=25, blood_pressure=130), RiskLevel.LOW)
    assert categories(recs) == ["Maintenance", "Weight Management", "Blood Pressure"]


def test_threshold_categories_not_added_below_cut_points(make_inputs):
    recs = generate_recommendations(make_inputs(bmi=24.9, blood_pressure=129), RiskLevel.MEDIUM)
    assert categories(recs) == ["Preventive Measures"]


def test_exactly_one_tier_rule_fires_per_level(make_inputs):
    inputs = make_inputs()
    tier_rules = [r for r in RECOMMENDATION_RULES if r.id.startswith("R_TIER_")]
    for level in RiskLevel:
        assert sum(r.applies(inputs, level) for r in tier_rules) == 1


def test_follow_up_cadence():
    assert generate_follow_up_plan(RiskLevel.HIGH).next_appointment == "2 weeks"
    assert generate_follow_up_plan(RiskLevel.MEDIUM).next_appointment == "3 months"
    assert generate_follow_up_plan(RiskLevel.LOW).next_appointment == "1 year"


def test_follow_up_plan_contents():
    plan = generate_follow_up_plan(RiskLevel.HIGH)
    assert plan.goals == ("HbA1c <7%", "5-10% weight loss", "BP <130/80 mmHg")
    d = generate_follow_up_plan(RiskLevel.LOW).to_dict()
    assert d == {
        "next_appointment": "1 year",
        "monitoring": ["Annual diabetes screening", "Regular health maintenance"],
        "interventions": ["Continue preventive measures"],
        "goals": ["Maintain current health status", "Prevent risk factor development"],
    }
