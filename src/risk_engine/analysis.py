"""
Narrative risk analysis and per-factor breakdown shown alongside the score.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .classifier import HIGH_THRESHOLD, MEDIUM_THRESHOLD, round_half_up
from .clinical_factors import ClinicalFindings
from .validation import PatientInputs

LIMITATIONS = (
    "Prediction based on limited clinical parameters",
    "Family history and genetic factors not fully assessed",
    "Laboratory results (HbA1c, lipids) not included",
    "Clinical judgment should override algorithmic predictions",
)


@dataclass(frozen=True)
class RiskAnalysis:
    summary: str
    key_findings: Tuple[str, ...]
    clinical_significance: str
    limitations: Tuple[str, ...] = LIMITATIONS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "key_findings": list(self.key_findings),
            "clinical_significance": self.clinical_significance,
            "limitations": list(self.limitations),
        }


def generate_risk_analysis(data: PatientInputs, risk_percentage: int,
                           findings: ClinicalFindings) -> RiskAnalysis:
    summary = (
        "Based on the provided clinical parameters, this patient has a "
        f"{risk_percentage}% predicted risk for developing type 2 diabetes."
    )

    key_findings = []
    if data.glucose >= 126:
        key_findings.append("Glucose level indicates diabetes (≥126 mg/dL)")
    elif data.glucose >= 100:
        key_findings.append("Glucose level indicates prediabetes (100-125 mg/dL)")
    if data.bmi >= 30:
        key_findings.append("BMI indicates obesity (≥30), a major diabetes risk factor")
    if findings.metabolic_syndrome.present:
        key_findings.append("Multiple criteria for metabolic syndrome present")

    if risk_percentage >= HIGH_THRESHOLD:
        significance = ("HIGH RISK: Immediate intervention recommended. Patient should be "
                        "evaluated for diabetes diagnosis and treatment.")
    elif risk_percentage >= MEDIUM_THRESHOLD:
        significance = "MODERATE RISK: Lifestyle interventions recommended. Regular monitoring advised."
    else:
        significance = "LOW RISK: Continue preventive measures. Routine screening appropriate."

    return RiskAnalysis(
        summary=summary,
        key_findings=tuple(key_findings),
        clinical_significance=significance,
    )


@dataclass(frozen=True)
class RiskFactor:
    factor: str
    field: str
    weight: float
    contribution: int
    description: str
    recommendations: Tuple[str, ...]
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "factor": self.factor,
            "weight": self.weight,
            "contribution": self.contribution,
            "description": self.description,
            "recommendations": list(self.recommendations),
            "status": self.status,
        }


def glucose_status(glucose: float) -> str:
    if glucose >= 126:
        return "High Risk"
    if glucose >= 100:
        return "Moderate Risk"
    return "Normal"


def bmi_status(bmi: float) -> str:
    if bmi >= 30:
        return "Obese"
    if bmi >= 25:
        return "Overweight"
    return "Normal"


def age_status(age: float) -> str:
    if age >= 65:
        return "High Risk"
    if age >= 45:
        return "Moderate Risk"
    return "Low Risk"


# (label, engine field, description, recommendations, status fn)
RISK_FACTOR_TABLE = (
    ("Glucose Level", "glucose", "Primary indicator of diabetes risk",
     ("Monitor blood glucose regularly", "Dietary modifications"), glucose_status),
    ("BMI", "bmi", "Body mass index correlation with diabetes",
     ("Weight management", "Nutritional counseling"), bmi_status),
    ("Age", "age", "Age-related diabetes risk increase",
     ("Regular screening", "Preventive care"), age_status),
)


def analyze_risk_factors(data: PatientInputs, weights: Mapping[str, float]) -> Tuple[RiskFactor, ...]:
    out = []
    for label, name, description, recs, status_fn in RISK_FACTOR_TABLE:
        weight = weights.get(name, 0.0)
        out.append(RiskFactor(
            factor=label,
            field=name,
            weight=weight,
            contribution=round_half_up(weight * 100),
            description=description,
            recommendations=recs,
            status=status_fn(getattr(data, name)),
        ))
    return tuple(out)
