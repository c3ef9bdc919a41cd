from datetime import datetime, timezone

import pytest

from src.risk_engine.history import PredictionHistory


@pytest.fixture
def assessment(engine, pima_patient):
    return engine.evaluate(pima_patient, "ensemble")


def test_newest_entry_first_and_oldest_evicted(pima_patient, assessment):
    history = PredictionHistory(max_entries=3)
    for i in range(5):
        history.record(pima_patient, assessment, patient_id=f"P{i}")

    assert len(history) == 3
    assert [e.patient_id for e in history.entries()] == ["P4", "P3", "P2"]


def test_entry_contents(pima_patient, assessment):
    history = PredictionHistory()
    ts = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    entry = history.record(pima_patient, assessment, timestamp=ts)

    assert entry.timestamp == "2024-05-01T09:30:00+00:00"
    assert entry.patient_id is None
    assert entry.input_data == pima_patient
    assert entry.prediction["risk_percentage"] == 70


def test_recorded_input_is_a_copy(pima_patient, assessment):
    history = PredictionHistory()
    history.record(pima_patient, assessment)
    pima_patient["glucose"] = 0
    assert history.entries()[0].input_data["glucose"] == 148


def test_json_round_trip(pima_patient, assessment):
    history = PredictionHistory(max_entries=10)
    history.record(pima_patient, assessment, patient_id="A")
    history.record(pima_patient, assessment, patient_id="B")

    restored = PredictionHistory.from_json(history.to_json(), max_entries=10)
    assert [e.to_dict() for e in restored.entries()] == [e.to_dict() for e in history.entries()]


def test_from_json_keeps_newest_when_bound_shrinks(pima_patient, assessment):
    history = PredictionHistory(max_entries=5)
    for i in range(4):
        history.record(pima_patient, assessment, patient_id=str(i))
    restored = PredictionHistory.from_json(history.to_json(), max_entries=2)
    assert [e.patient_id for e in restored.entries()] == ["3", "2"]


def test_for_patient_and_clear(pima_patient, assessment):
    history = PredictionHistory()
    history.record(pima_patient, assessment, patient_id="A")
    history.record(pima_patient, assessment, patient_id="B")
    history.record(pima_patient, assessment, patient_id="A")
    assert len(history.for_patient("A")) == 2
    history.clear()
    assert len(history) == 0


def test_dataframe_view(pima_patient, assessment):
    history = PredictionHistory()
    assert history.to_dataframe().empty
    history.record(pima_patient, assessment, patient_id="A")
    df = history.to_dataframe()
    assert list(df.columns) == ["timestamp", "patient_id", "risk_percentage", "risk_level", "model_used"]
    assert df.iloc[0]["risk_level"] == "high"


def test_bound_must_be_positive():
    with pytest.raises(ValueError):
        PredictionHistory(max_entries=0)
