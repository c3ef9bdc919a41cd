"""
Factor normalizer: maps raw clinical values to a [0,1] risk contribution.

Glucose, BMI, age and diastolic blood pressure use step functions on standard
clinical cut-points; the remaining fields scale linearly and cap at 1.0.
"""
from typing import Callable, Dict

from .validation import PatientInputs


def normalize_glucose(glucose: float) -> float:
    # Normal fasting: 70-100, prediabetes: 101-125, diabetes: >=126
    if glucose < 70:
        return 0.1
    if glucose <= 100:
        return 0.2
    if glucose <= 125:
        return 0.6
    return 0.9


def normalize_bmi(bmi: float) -> float:
    # Underweight sits above normal: risk is elevated at both extremes.
    if bmi < 18.5:
        return 0.2
    if bmi < 25:
        return 0.1
    if bmi < 30:
        return 0.5
    return 0.8


def normalize_age(age: float) -> float:
    if age < 25:
        return 0.1
    if age < 45:
        return 0.3
    if age < 65:
        return 0.6
    return 0.8


def normalize_blood_pressure(bp: float) -> float:
    # Diastolic. Normal: <80, stage 1: 80-89, stage 2: >=90
    if bp < 80:
        return 0.1
    if bp < 90:
        return 0.4
    return 0.7


def _linear(cap: float) -> Callable[[float], float]:
    return lambda value: min(max(value, 0.0) / cap, 1.0)


NORMALIZERS: Dict[str, Callable[[float], float]] = {
    "glucose": normalize_glucose,
    "bmi": normalize_bmi,
    "age": normalize_age,
    "blood_pressure": normalize_blood_pressure,
    "diabetes_pedigree_function": _linear(2.0),
    "pregnancies": _linear(15.0),
    "skin_thickness": _linear(50.0),
    "insulin": _linear(300.0),
}


def normalize(field_name: str, raw_value: float) -> float:
    try:
        fn = NORMALIZERS[field_name]
    except KeyError:
        raise ValueError(f"No normalization rule for field {field_name!r}") from None
    return fn(raw_value)


def normalize_all(inputs: PatientInputs) -> Dict[str, float]:
    return {name: fn(getattr(inputs, name)) for name, fn in NORMALIZERS.items()}
