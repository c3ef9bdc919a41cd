"""Shared fixtures for the risk engine tests."""
import pytest

from src.risk_engine.scoring import RiskEngine
from src.risk_engine.validation import PatientInputs


@pytest.fixture
def engine():
    return RiskEngine()


@pytest.fixture
def pima_patient():
    """First row of the Pima Indians diabetes dataset, engine keys."""
    return {
        "glucose": 148,
        "bmi": 33.6,
        "age": 50,
        "blood_pressure": 72,
        "diabetes_pedigree_function": 0.627,
        "pregnancies": 6,
        "skin_thickness": 35,
        "insulin": 0,
    }


@pytest.fixture
def healthy_patient():
    return {"glucose": 85, "bmi": 22.0, "age": 30, "blood_pressure": 70}


@pytest.fixture
def make_inputs():
    """Factory for PatientInputs with normal defaults for the required fields."""
    def _make(**overrides) -> PatientInputs:
        values = {"glucose": 90.0, "bmi": 22.0, "age": 30.0, "blood_pressure": 70.0}
        values.update(overrides)
        return PatientInputs(**values)
    return _make
