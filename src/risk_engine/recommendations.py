"""
Recommendation rules and follow-up plans.
- Each RecommendationRule contributes one category of items when its condition fires.
- Exactly one risk-tier rule fires per assessment; threshold rules append extra categories.
- Follow-up plans are a fixed lookup by risk level.
"""
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Tuple

from .classifier import RiskLevel
from .validation import PatientInputs


@dataclass(frozen=True)
class RecommendationCategory:
    category: str
    items: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "items": list(self.items)}


@dataclass
class RecommendationRule:
    id: str
    description: str
    condition: Callable[[PatientInputs, RiskLevel], bool]
    category: str
    items: List[str] = field(default_factory=list)
    priority: int = 100  # lower numbers = listed first

    def applies(self, data: PatientInputs, level: RiskLevel) -> bool:
        return bool(self.condition(data, level))

    def to_category(self) -> RecommendationCategory:
        return RecommendationCategory(self.category, tuple(self.items))


def make_recommendation_rules() -> List[RecommendationRule]:
    rules: List[RecommendationRule] = []

    # ----- Risk tier (exactly one fires) -----
    rules.append(RecommendationRule(
        id="R_TIER_HIGH",
        description="High risk -> immediate diagnostic work-up and specialist referral.",
        condition=lambda p, level: level is RiskLevel.HIGH,
        category="Immediate Actions",
        items=[
            "Schedule appointment with endocrinologist within 2 weeks",
            "Order comprehensive metabolic panel including HbA1c",
            "Begin diabetes self-monitoring education",
            "Consider pharmacological intervention",
        ],
        priority=1,
    ))
    rules.append(RecommendationRule(
        id="R_TIER_MEDIUM",
        description="Moderate risk -> structured lifestyle prevention.",
        condition=lambda p, level: level is RiskLevel.MEDIUM,
        category="Preventive Measures",
        items=[
            "Implement structured lifestyle intervention program",
            "Schedule follow-up in 3-6 months",
            "Annual diabetes screening",
            "Nutritional counseling referral",
        ],
        priority=1,
    ))
    rules.append(RecommendationRule(
        id="R_TIER_LOW",
        description="Low risk -> maintain healthy habits and routine screening.",
        condition=lambda p, level: level is RiskLevel.LOW,
        category="Maintenance",
        items=[
            "Continue current healthy lifestyle practices",
            "Routine diabetes screening every 3 years",
            "Maintain healthy weight and regular exercise",
            "Monitor for changes in risk factors",
        ],
        priority=1,
    ))

    # ----- Parameter-specific -----
    rules.append(RecommendationRule(
        id="R_WEIGHT",
        description="Overweight or obese (BMI >= 25).",
        condition=lambda p, level: p.bmi >= 25,
        category="Weight Management",
        items=[
            "Target 5-10% weight loss if overweight",
            "Consider referral to dietitian",
            "Increase physical activity to 150 min/week",
            "Monitor progress with regular weigh-ins",
        ],
        priority=10,
    ))
    rules.append(RecommendationRule(
        id="R_BLOOD_PRESSURE",
        description="Diastolic blood pressure >= 130 mmHg.",
        condition=lambda p, level: p.blood_pressure >= 130,
        category="Blood Pressure",
        items=[
            "Monitor blood pressure regularly",
            "Reduce sodium intake (<2300mg/day)",
            "Increase potassium-rich foods",
            "Consider antihypertensive therapy if persistently elevated",
        ],
        priority=20,
    ))

    return rules


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = tuple(make_recommendation_rules())


def generate_recommendations(data: PatientInputs, level: RiskLevel) -> Tuple[RecommendationCategory, ...]:
    fired = [r for r in RECOMMENDATION_RULES if r.applies(data, level)]
    # sort is stable, so rules with equal priority keep definition order
    fired.sort(key=lambda r: r.priority)
    return tuple(r.to_category() for r in fired)


@dataclass(frozen=True)
class FollowUpPlan:
    next_appointment: str
    monitoring: Tuple[str, ...]
    interventions: Tuple[str, ...]
    goals: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        return {k: list(v) if isinstance(v, tuple) else v for k, v in out.items()}


FOLLOW_UP_PLANS: Mapping[RiskLevel, FollowUpPlan] = MappingProxyType({
    RiskLevel.HIGH: FollowUpPlan(
        next_appointment="2 weeks",
        monitoring=("Weekly glucose monitoring", "Monthly weight checks", "BP monitoring"),
        interventions=("Diabetes education", "Medication management", "Intensive lifestyle counseling"),
        goals=("HbA1c <7%", "5-10% weight loss", "BP <130/80 mmHg"),
    ),
    RiskLevel.MEDIUM: FollowUpPlan(
        next_appointment="3 months",
        monitoring=("Quarterly glucose checks", "Semi-annual HbA1c", "Regular weight monitoring"),
        interventions=("Lifestyle modification program", "Nutritional counseling"),
        goals=("Prevent diabetes progression", "7% weight loss", "Maintain healthy BP"),
    ),
    RiskLevel.LOW: FollowUpPlan(
        next_appointment="1 year",
        monitoring=("Annual diabetes screening", "Regular health maintenance"),
        interventions=("Continue preventive measures",),
        goals=("Maintain current health status", "Prevent risk factor development"),
    ),
})


def generate_follow_up_plan(level: RiskLevel) -> FollowUpPlan:
    return FOLLOW_UP_PLANS[level]
