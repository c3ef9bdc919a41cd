"""
Input validation for a single prediction request.
- The four required fields (glucose, blood pressure, BMI, age) must be present,
  numeric and non-zero; otherwise ValidationError lists them.
- Every other field defaults to 0 when absent or unparseable.
"""
import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Mapping, Optional

from .errors import ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("glucose", "blood_pressure", "bmi", "age")

# Plausible ranges the dashboard enforces before submitting.
FIELD_RANGES = {
    "glucose": (50, 400, "Glucose level should be between 50-400 mg/dL"),
    "bmi": (10, 70, "BMI should be between 10-70"),
    "age": (18, 120, "Age should be between 18-120 years"),
}


def safe_num(x: Any) -> Optional[float]:
    """Convert input to float if possible; return None for empty/invalid."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, (int, float)):
        value = float(x)
    else:
        s = str(x).strip()
        if s == "":
            return None
        try:
            value = float(s)
        except ValueError:
            return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


@dataclass(frozen=True)
class PatientInputs:
    glucose: float
    bmi: float
    age: float
    blood_pressure: float
    diabetes_pedigree_function: float = 0.0
    pregnancies: float = 0.0
    skin_thickness: float = 0.0
    insulin: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def missing_required(data: Mapping[str, Any]) -> List[str]:
    return [name for name in REQUIRED_FIELDS if not safe_num(data.get(name))]


def validate_inputs(data: Mapping[str, Any]) -> PatientInputs:
    """Build PatientInputs from engine-keyed raw values or raise ValidationError."""
    missing = missing_required(data)
    if missing:
        logger.info("Rejected prediction request, missing fields: %s", missing)
        raise ValidationError(missing)

    values = {}
    for f in fields(PatientInputs):
        value = safe_num(data.get(f.name))
        values[f.name] = value if value is not None else 0.0
    return PatientInputs(**values)


def check_field_ranges(data: Mapping[str, Any]) -> Dict[str, str]:
    """Per-field messages for values outside plausible clinical ranges.

    Blank fields are skipped here; presence is the validator's job.
    """
    errors = {}
    for name, (low, high, message) in FIELD_RANGES.items():
        value = safe_num(data.get(name))
        if value is None:
            continue
        if value < low or value > high:
            errors[name] = message
    return errors
