"""
Clinical factor checks computed from raw (not normalized) inputs.
- Metabolic syndrome: simplified 3-criteria proxy (BMI, glucose, diastolic BP).
- Insulin resistance: (glucose/100) * (bmi/25) * (age/40).
- Cardiovascular risk: count of age, BMI, BP and glucose risk factors.
"""
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

from .validation import PatientInputs


class FactorLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class MetabolicSyndrome:
    present: bool
    criteria_count: int
    description: str


@dataclass(frozen=True)
class InsulinResistance:
    score: float
    level: FactorLevel
    description: str


@dataclass(frozen=True)
class CardiovascularRisk:
    level: FactorLevel
    factor_count: int
    description: str


@dataclass(frozen=True)
class ClinicalFindings:
    metabolic_syndrome: MetabolicSyndrome
    insulin_resistance: InsulinResistance
    cardiovascular_risk: CardiovascularRisk

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["insulin_resistance"]["level"] = self.insulin_resistance.level.value
        out["cardiovascular_risk"]["level"] = self.cardiovascular_risk.level.value
        return out


def check_metabolic_syndrome(data: PatientInputs) -> MetabolicSyndrome:
    criteria = 0
    if data.bmi >= 30:  # central obesity approximation
        criteria += 1
    if data.glucose >= 100:
        criteria += 1
    if data.blood_pressure >= 85:
        criteria += 1

    present = criteria >= 2
    return MetabolicSyndrome(
        present=present,
        criteria_count=criteria,
        description="Likely metabolic syndrome" if present else "Low risk for metabolic syndrome",
    )


def check_insulin_resistance(data: PatientInputs) -> InsulinResistance:
    score = (data.glucose / 100) * (data.bmi / 25) * (data.age / 40)
    if score > 1.5:
        level = FactorLevel.HIGH
    elif score > 1.0:
        level = FactorLevel.MODERATE
    else:
        level = FactorLevel.LOW
    return InsulinResistance(
        score=score,
        level=level,
        description=f"Insulin resistance risk: {level.value}",
    )


def assess_cardiovascular_risk(data: PatientInputs) -> CardiovascularRisk:
    count = sum((
        data.age >= 45,
        data.bmi >= 25,
        data.blood_pressure >= 130,
        data.glucose >= 100,
    ))
    if count >= 3:
        level = FactorLevel.HIGH
    elif count >= 2:
        level = FactorLevel.MODERATE
    else:
        level = FactorLevel.LOW
    return CardiovascularRisk(
        level=level,
        factor_count=count,
        description=f"Cardiovascular risk factors present: {count}",
    )


def analyze_clinical_factors(data: PatientInputs) -> ClinicalFindings:
    return ClinicalFindings(
        metabolic_syndrome=check_metabolic_syndrome(data),
        insulin_resistance=check_insulin_resistance(data),
        cardiovascular_risk=assess_cardiovascular_risk(data),
    )
