"""
FSP Streamlit Dashboard.

Single-screen calculator: every widget change reruns the script and the
result is recomputed from the current inputs.
Run with: streamlit run fsp/dashboard/app.py
"""

import streamlit as st

from fsp.collector import InputCollector
from fsp.core.config import get_settings
from fsp.core.constants import DISCLAIMER, FIELD_OPTIONS, NUMERIC_RANGES
from fsp.dashboard.components.band_indicator import render_band_indicator
from fsp.dashboard.components.feature_breakdown import render_feature_breakdown
from fsp.dashboard.components.score_card import render_score_card
from fsp.explain.generator import ExplanationGenerator
from fsp.explain.templates import RANGE_HINTS

NUMERIC_LABELS = {
    "age": "Age (years)",
    "weight": "Weight (kg)",
    "height": "Height (cm)",
    "marriage_years": "Marriage duration (years)",
}

SELECT_LABELS = {
    "lifestyle": "Lifestyle",
    "menstruation": "Menstruation pattern",
    "sex_frequency": "Sexual intercourse",
    "diagnosis": "Diagnosis",
    "ovulation": "Ovulation pattern",
    "stress": "Stress level",
    "sleep": "Sleep quality",
    "diet": "Diet quality",
    "substance": "Substance use",
    "family_history": "Family history",
}


def get_collector() -> InputCollector:
    """Session-scoped collector, created with defaults on first load."""
    if "collector" not in st.session_state:
        settings = get_settings()
        st.session_state["collector"] = InputCollector(
            show_breakdown=settings.show_breakdown,
        )
    return st.session_state["collector"]


def number_field(collector: InputCollector, field: str) -> None:
    """Render a clamped number input and push its value to the collector."""
    lo, hi, step = NUMERIC_RANGES[field]
    current = getattr(collector.record, field)
    if isinstance(current, float):
        lo, hi, step = float(lo), float(hi), float(step)

    value = st.number_input(
        NUMERIC_LABELS[field],
        min_value=lo,
        max_value=hi,
        value=current,
        step=step,
        key=f"field_{field}",
    )
    collector.set(field, value)


def select_field(collector: InputCollector, field: str) -> None:
    """Render a select box and push its value to the collector."""
    options = FIELD_OPTIONS[field]
    current = getattr(collector.record, field)
    index = options.index(current) if current in options else 0

    value = st.selectbox(
        SELECT_LABELS[field],
        options,
        index=index,
        key=f"field_{field}",
    )
    collector.set(field, value)


def main() -> None:
    """Main dashboard application."""
    st.set_page_config(
        page_title="Fertility Score Predictor",
        page_icon="🌸",
        layout="wide",
    )

    st.title("Fertility Score Predictor (FSP)")
    st.caption(
        "Extended version with lifestyle, health, and family history factors. "
        "Educational use only."
    )

    collector = get_collector()

    col1, col2 = st.columns(2)

    with col1:
        number_field(collector, "age")
        st.caption(RANGE_HINTS["age"])
        number_field(collector, "weight")
        number_field(collector, "height")
        st.metric("BMI (kg/m²)", f"{collector.result.bmi}")
        st.caption(RANGE_HINTS["bmi"])
        number_field(collector, "marriage_years")
        st.caption(RANGE_HINTS["marriage"])
        for field in ("lifestyle", "menstruation", "sex_frequency"):
            select_field(collector, field)

    with col2:
        for field in (
            "diagnosis",
            "ovulation",
            "stress",
            "sleep",
            "diet",
            "substance",
            "family_history",
        ):
            select_field(collector, field)

    result = collector.result

    st.divider()

    rcol1, rcol2 = st.columns([2, 1])
    with rcol1:
        render_score_card(
            total=result.total,
            max_total=result.max_total,
            band=result.band,
        )
    with rcol2:
        render_band_indicator(result.band, total=result.total)

    st.markdown("### Interpretation")
    st.info(ExplanationGenerator(include_disclaimer=False).generate(result))

    st.button(
        "Hide breakdown" if collector.show_breakdown else "Show breakdown",
        on_click=collector.toggle_breakdown,
    )
    if collector.show_breakdown:
        render_feature_breakdown(result)

    st.caption(DISCLAIMER)


if __name__ == "__main__":
    main()
