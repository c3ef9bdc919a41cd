"""
Risk classification.

The raw score becomes a whole percentage clamped to [5, 95]. With the clinical
overlay enabled, metabolic syndrome adds 10 points and high insulin resistance
adds 5; the bonused value is clamped again and only drives the bucket, the
reported percentage stays un-bonused.
"""
import math
from dataclasses import dataclass
from enum import Enum

from .clinical_factors import ClinicalFindings, FactorLevel

MIN_PERCENTAGE = 5
MAX_PERCENTAGE = 95
HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40

METABOLIC_SYNDROME_BONUS = 10
INSULIN_RESISTANCE_BONUS = 5


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_percentage(cls, percentage: float) -> "RiskLevel":
        if percentage >= HIGH_THRESHOLD:
            return cls.HIGH
        if percentage >= MEDIUM_THRESHOLD:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True)
class Classification:
    risk_percentage: int
    adjusted_percentage: int
    risk_level: RiskLevel


def round_half_up(value: float) -> int:
    # round() would send 0.5 to the even neighbour
    return int(math.floor(value + 0.5))


def clamp_percentage(value: int) -> int:
    return max(MIN_PERCENTAGE, min(MAX_PERCENTAGE, value))


def to_percentage(raw_score: float) -> int:
    return clamp_percentage(round_half_up(raw_score * 100))


def clinical_bonus(findings: ClinicalFindings) -> int:
    bonus = 0
    if findings.metabolic_syndrome.present:
        bonus += METABOLIC_SYNDROME_BONUS
    if findings.insulin_resistance.level is FactorLevel.HIGH:
        bonus += INSULIN_RESISTANCE_BONUS
    return bonus


def classify(raw_score: float, findings: ClinicalFindings, overlay: bool = True) -> Classification:
    percentage = to_percentage(raw_score)
    adjusted = percentage
    if overlay:
        adjusted = clamp_percentage(percentage + clinical_bonus(findings))
    return Classification(
        risk_percentage=percentage,
        adjusted_percentage=adjusted,
        risk_level=RiskLevel.from_percentage(adjusted),
    )
