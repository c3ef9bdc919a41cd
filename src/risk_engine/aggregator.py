"""Weighted aggregation of normalized factors into a raw risk score."""
import logging
from types import MappingProxyType
from typing import Mapping

from .profiles import ModelProfile

logger = logging.getLogger(__name__)

# Summation follows this order so scores are reproducible to the last bit.
WEIGHTS: Mapping[str, float] = MappingProxyType({
    "glucose": 0.35,
    "bmi": 0.18,
    "age": 0.15,
    "blood_pressure": 0.12,
    "diabetes_pedigree_function": 0.10,
    "pregnancies": 0.05,
    "skin_thickness": 0.03,
    "insulin": 0.02,
})


def weighted_score(normalized: Mapping[str, float]) -> float:
    score = 0.0
    for name, weight in WEIGHTS.items():
        score += normalized.get(name, 0.0) * weight
    return score


def apply_model_multiplier(score: float, profile: ModelProfile) -> float:
    """Scale the aggregate score (never individual factors) by the model's multiplier."""
    return score * profile.multiplier


def aggregate(normalized: Mapping[str, float], profile: ModelProfile) -> float:
    base = weighted_score(normalized)
    adjusted = apply_model_multiplier(base, profile)
    logger.debug("Weighted score %.4f -> %.4f (%s)", base, adjusted, profile.model_id.value)
    return adjusted
