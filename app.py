# app.py
import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from engine import MODEL_SELECTOR_KEY, get_dashboard_engine, map_form_row
from src.risk_engine.config import get_settings
from src.risk_engine.errors import ValidationError
from src.risk_engine.history import PredictionHistory
from src.risk_engine.profiles import MODEL_CATALOG, ModelId
from src.risk_engine.report import build_pdf_report, render_text_report
from src.risk_engine.validation import check_field_ranges

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper(),
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title=settings.app_name, layout="centered")
st.title("Diabetes Risk Assessment")

st.markdown("Enter the patient's clinical measurements. Glucose, blood pressure, BMI and age are required; "
            "other fields can be left blank. Click **Predict Risk** to view the estimate.")

if "history" not in st.session_state:
    st.session_state.history = PredictionHistory(max_entries=settings.history_max_entries)
    st.session_state.saved = PredictionHistory(max_entries=settings.saved_max_entries)
    st.session_state.last = None

model_ids = [m.value for m in MODEL_CATALOG]

with st.form("prediction_form"):
    patient_id = st.text_input("Patient ID (optional)", value="")
    col1, col2 = st.columns(2)
    with col1:
        glucose = st.text_input("Glucose (mg/dL)", value="")
        blood_pressure = st.text_input("Diastolic blood pressure (mmHg)", value="")
        bmi = st.text_input("BMI (kg/m^2)", value="")
        age = st.text_input("Age (years)", value="")
    with col2:
        pedigree = st.text_input("Diabetes pedigree function (optional)", value="")
        pregnancies = st.text_input("Pregnancies (optional)", value="")
        skin = st.text_input("Skin thickness (mm) (optional)", value="")
        insulin = st.text_input("Insulin (mu U/ml) (optional)", value="")
    selected_model = st.selectbox(
        "Model",
        model_ids,
        index=model_ids.index(settings.default_model) if settings.default_model in model_ids else 0,
        format_func=lambda k: MODEL_CATALOG[ModelId(k)].name,
    )
    submitted = st.form_submit_button("Predict Risk")


def build_form_row():
    return {
        "glucose": glucose,
        "bloodPressure": blood_pressure,
        "bmi": bmi,
        "age": age,
        "diabetesPedigreeFunction": pedigree,
        "pregnancies": pregnancies,
        "skinThickness": skin,
        "insulin": insulin,
        MODEL_SELECTOR_KEY: selected_model,
    }


if submitted:
    row = build_form_row()
    data = map_form_row(row)
    range_errors = check_field_ranges(data)
    if range_errors:
        for name, message in range_errors.items():
            st.error(f"{name}: {message}")
    else:
        try:
            with st.spinner("Analyzing..."):
                assessment = get_dashboard_engine(settings).evaluate(data, row[MODEL_SELECTOR_KEY])
        except ValidationError as e:
            st.error(str(e))
        else:
            st.session_state.last = (data, assessment, patient_id.strip() or None)
            st.session_state.history.record(data, assessment, patient_id=patient_id.strip() or None)

if st.session_state.last is not None:
    data, assessment, pid = st.session_state.last

    st.subheader("Diabetes Risk Assessment")
    c1, c2, c3 = st.columns(3)
    c1.metric("Risk", f"{assessment.risk_percentage}%")
    c2.metric("Level", assessment.risk_level.value.capitalize())
    c3.metric("Confidence", f"{assessment.confidence}%")
    st.caption(f"Model: {assessment.model_used}")

    st.markdown(f"**{assessment.analysis.clinical_significance}**")
    st.write(assessment.analysis.summary)
    for finding in assessment.analysis.key_findings:
        st.markdown(f"- {finding}")

    st.subheader("Clinical Recommendations")
    for category in assessment.recommendations:
        st.markdown(f"**{category.category}**")
        for item in category.items:
            st.markdown(f"- {item}")

    st.subheader("Follow-up Plan")
    plan = assessment.follow_up
    st.write(f"Next appointment: {plan.next_appointment}")
    st.table(pd.DataFrame({
        "Monitoring": pd.Series(plan.monitoring),
        "Interventions": pd.Series(plan.interventions),
        "Goals": pd.Series(plan.goals),
    }).fillna(""))

    with st.expander("Show risk factor breakdown"):
        st.dataframe(pd.DataFrame([f.to_dict() for f in assessment.risk_factors])[
            ["factor", "status", "contribution", "description"]])
        findings = assessment.clinical_factors
        st.write(findings.metabolic_syndrome.description)
        st.write(findings.insulin_resistance.description)
        st.write(findings.cardiovascular_risk.description)
        st.write("Limitations:")
        for item in assessment.analysis.limitations:
            st.markdown(f"- {item}")

    now = datetime.now()
    d1, d2, d3 = st.columns(3)
    d1.download_button("Download report (.txt)", render_text_report(assessment, now),
                       file_name="diabetes_risk_report.txt")
    d2.download_button("Download report (.pdf)", build_pdf_report(assessment, now),
                       file_name="diabetes_risk_report.pdf", mime="application/pdf")
    if d3.button("Save prediction"):
        st.session_state.saved.record(data, assessment, patient_id=pid)
        st.success("Prediction saved to patient records")

if len(st.session_state.history):
    st.subheader("Prediction History")
    st.dataframe(st.session_state.history.to_dataframe())
