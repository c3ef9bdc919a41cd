import pytest

from src.risk_engine.aggregator import WEIGHTS, aggregate, apply_model_multiplier, weighted_score
from src.risk_engine.profiles import MODEL_CATALOG, ModelId


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_weights_are_read_only():
    with pytest.raises(TypeError):
        WEIGHTS["glucose"] = 0.5


def test_weighted_score_pima_example():
    normalized = {
        "glucose": 0.9, "bmi": 0.8, "age": 0.6, "blood_pressure": 0.1,
        "diabetes_pedigree_function": 0.3135, "pregnancies": 0.4,
        "skin_thickness": 0.7, "insulin": 0.0,
    }
    assert weighted_score(normalized) == pytest.approx(0.63335)


def test_missing_factor_counts_as_zero():
    assert weighted_score({"glucose": 1.0}) == pytest.approx(0.35)


@pytest.mark.parametrize("model_id,multiplier", [
    (ModelId.ENSEMBLE, 1.10),
    (ModelId.GRADIENT, 1.05),
    (ModelId.LOGISTIC, 1.00),
    (ModelId.NEURAL, 0.95),
])
def test_model_multiplier_scales_aggregate(model_id, multiplier):
    profile = MODEL_CATALOG[model_id]
    assert apply_model_multiplier(0.5, profile) == pytest.approx(0.5 * multiplier)
    assert aggregate({"glucose": 1.0}, profile) == pytest.approx(0.35 * multiplier)
