"""
Risk scoring pipeline: validate -> normalize -> aggregate -> clinical factors
-> classify -> recommendations and follow-up.

RiskEngine holds only immutable configuration; evaluate() is a pure function of
its arguments, so repeated calls with the same inputs return equal assessments.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .aggregator import WEIGHTS, aggregate
from .analysis import RiskAnalysis, RiskFactor, analyze_risk_factors, generate_risk_analysis
from .classifier import RiskLevel, classify, round_half_up
from .clinical_factors import ClinicalFindings, analyze_clinical_factors
from .errors import ConfigurationError
from .normalizer import normalize_all
from .profiles import FALLBACK_MODEL, MODEL_CATALOG, ModelId, ModelProfile, resolve_model
from .recommendations import (
    FollowUpPlan,
    RecommendationCategory,
    generate_follow_up_plan,
    generate_recommendations,
)
from .validation import PatientInputs, validate_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskAssessment:
    risk_percentage: int
    adjusted_percentage: int
    risk_level: RiskLevel
    confidence: int
    model_used: str
    model: ModelProfile
    raw_score: float
    normalized_factors: Mapping[str, float]
    clinical_factors: ClinicalFindings
    analysis: RiskAnalysis
    recommendations: Tuple[RecommendationCategory, ...]
    risk_factors: Tuple[RiskFactor, ...]
    follow_up: FollowUpPlan

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serializable view for renderers, reports and history."""
        return {
            "risk_percentage": self.risk_percentage,
            "adjusted_percentage": self.adjusted_percentage,
            "risk_level": self.risk_level.value,
            "confidence": self.confidence,
            "model_used": self.model_used,
            "model_metrics": self.model.to_dict(),
            "raw_score": self.raw_score,
            "normalized_factors": dict(self.normalized_factors),
            "clinical_factors": self.clinical_factors.to_dict(),
            "analysis": self.analysis.to_dict(),
            "recommendations": [c.to_dict() for c in self.recommendations],
            "risk_factors": [f.to_dict() for f in self.risk_factors],
            "follow_up": self.follow_up.to_dict(),
        }


class RiskEngine:
    """Deterministic diabetes risk engine.

    Args:
        clinical_overlay: add clinical-factor bonuses before bucketing the risk level.
        default_model: model used when the request leaves the selector blank.
    """

    def __init__(self, clinical_overlay: bool = True, default_model: Any = ModelId.ENSEMBLE):
        self.clinical_overlay = clinical_overlay
        self.default_model = resolve_model(default_model)

    def select_model(self, model_id: Optional[Any]) -> ModelProfile:
        if model_id is None or str(model_id).strip() == "":
            return self.default_model
        try:
            return resolve_model(model_id)
        except ConfigurationError as exc:
            # model choice is advisory: score with a neutral multiplier instead of failing
            fallback = MODEL_CATALOG[FALLBACK_MODEL]
            logger.warning("%s; falling back to %s", exc, fallback.name)
            return fallback

    def evaluate(self, data: Mapping[str, Any], model_id: Optional[Any] = None) -> RiskAssessment:
        """Score engine-keyed raw values. Raises ValidationError on missing required fields."""
        inputs = validate_inputs(data)
        return self.assess(inputs, self.select_model(model_id))

    def assess(self, inputs: PatientInputs, model: ModelProfile) -> RiskAssessment:
        normalized = normalize_all(inputs)
        raw_score = aggregate(normalized, model)
        findings = analyze_clinical_factors(inputs)
        result = classify(raw_score, findings, overlay=self.clinical_overlay)
        logger.debug("Normalized factors: %s", normalized)

        assessment = RiskAssessment(
            risk_percentage=result.risk_percentage,
            adjusted_percentage=result.adjusted_percentage,
            risk_level=result.risk_level,
            confidence=round_half_up(model.accuracy * 100),
            model_used=model.name,
            model=model,
            raw_score=raw_score,
            normalized_factors=MappingProxyType(normalized),
            clinical_factors=findings,
            analysis=generate_risk_analysis(inputs, result.risk_percentage, findings),
            recommendations=generate_recommendations(inputs, result.risk_level),
            risk_factors=analyze_risk_factors(inputs, WEIGHTS),
            follow_up=generate_follow_up_plan(result.risk_level),
        )
        logger.info(
            "Risk assessment: %d%% (adjusted %d%%, %s) using %s",
            assessment.risk_percentage, assessment.adjusted_percentage,
            assessment.risk_level.value, model.name,
        )
        return assessment
