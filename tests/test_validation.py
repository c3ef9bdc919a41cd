import pytest

from src.risk_engine.errors import ValidationError
from src.risk_engine.validation import check_field_ranges, safe_num, validate_inputs


def test_safe_num_parses_strings_and_numbers():
    assert safe_num("12.5") == 12.5
    assert safe_num(" 7 ") == 7.0
    assert safe_num(3) == 3.0


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", float("nan"), True])
def test_safe_num_rejects_blank_and_invalid(raw):
    assert safe_num(raw) is None


def test_missing_glucose_names_glucose(healthy_patient):
    del healthy_patient["glucose"]
    with pytest.raises(ValidationError) as exc:
        validate_inputs(healthy_patient)
    assert exc.value.missing_fields == ["glucose"]
    assert "glucose" in str(exc.value)


def test_all_required_fields_reported_in_order():
    with pytest.raises(ValidationError) as exc:
        validate_inputs({"insulin": 80})
    assert exc.value.missing_fields == ["glucose", "blood_pressure", "bmi", "age"]


@pytest.mark.parametrize("bad", ["0", 0, "not a number", ""])
def test_zero_or_unparseable_required_value_is_missing(healthy_patient, bad):
    healthy_patient["bmi"] = bad
    with pytest.raises(ValidationError) as exc:
        validate_inputs(healthy_patient)
    assert exc.value.missing_fields == ["bmi"]


def test_optional_fields_default_to_zero(healthy_patient):
    healthy_patient["insulin"] = "n/a"
    inputs = validate_inputs(healthy_patient)
    assert inputs.insulin == 0.0
    assert inputs.pregnancies == 0.0
    assert inputs.skin_thickness == 0.0
    assert inputs.diabetes_pedigree_function == 0.0


def test_string_values_are_converted(healthy_patient):
    healthy_patient["glucose"] = "148"
    assert validate_inputs(healthy_patient).glucose == 148.0


def test_field_ranges_report_out_of_range_values():
    errors = check_field_ranges({"glucose": 45, "bmi": 80, "age": 40})
    assert errors == {
        "glucose": "Glucose level should be between 50-400 mg/dL",
        "bmi": "BMI should be between 10-70",
    }


def test_field_ranges_skip_blank_values():
    assert check_field_ranges({"glucose": "", "age": 17}) == {"age": "Age should be between 18-120 years"}
