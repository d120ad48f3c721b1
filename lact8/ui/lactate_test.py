"""
Lactate Step Test UI.

Provides:
- Step table editor (intensity, heart rate, lactate)
- LT1/LT2 calculation with result cards
- Lactate curve chart
- Markdown / CSV export
"""
import logging
from typing import List

import streamlit as st

from lact8.calculations.lactate import Step, ThresholdResult
from lact8.config import Config
from lact8.frontend.components import UIComponents
from lact8.frontend.state import StateManager
from lact8.plots import build_lactate_chart
from lact8.reporting import export_result_csv, export_steps_csv, generate_markdown_report
from lact8.step_table import dataframe_to_steps, steps_to_dataframe
from services import calculate_thresholds, validate_step_table

logger = logging.getLogger(__name__)


def render_steps_editor(state: StateManager) -> List[Step]:
    """
    Render the editable step table and return the steps as currently shown.

    Rows added in the editor get their id here; the table is then
    committed so the ids stay stable on the next rerun.
    """
    st.subheader("📝 Test Steps")

    edited_df = st.data_editor(
        steps_to_dataframe(state.get_steps()),
        key=state.editor_key,
        num_rows="dynamic",
        hide_index=True,
        use_container_width=True,
        column_config={
            "id": None,
            "intensity": st.column_config.NumberColumn(
                "Intensity", min_value=0.0, help="Power [W] or speed, any unit"
            ),
            "heart_rate_bpm": st.column_config.NumberColumn(
                "Heart Rate (bpm)", min_value=0, max_value=Config.MAX_HEART_RATE, step=1
            ),
            "lactate_mmol_l": st.column_config.NumberColumn(
                "Lactate (mmol/L)", min_value=0.0, max_value=Config.MAX_LACTATE, step=0.1, format="%.1f"
            ),
        },
    )

    has_new_rows = edited_df["id"].isna().any() if "id" in edited_df.columns else False
    steps = dataframe_to_steps(edited_df, state.id_gen)
    if has_new_rows:
        state.set_steps(steps)
        st.rerun()

    is_valid, msg = validate_step_table(edited_df)
    if not is_valid:
        st.warning(msg)

    return steps


def render_results(steps: List[Step], result: ThresholdResult) -> None:
    """Threshold cards and the lactate chart."""
    st.subheader("🎯 Thresholds")
    col1, col2 = st.columns(2)
    with col1:
        UIComponents.render_threshold_card("LT1 (Aerobic Threshold)", result.lt1, Config.COLOR_LT1)
    with col2:
        UIComponents.render_threshold_card("LT2 (Anaerobic Threshold)", result.lt2, Config.COLOR_LT2)

    st.plotly_chart(build_lactate_chart(steps, result), use_container_width=True)


def render_export(steps: List[Step], result: ThresholdResult) -> None:
    """Markdown preview with copy button plus file downloads."""
    st.subheader("📤 Export Results")
    markdown = generate_markdown_report(steps, result.lt1, result.lt2)
    st.code(markdown, language="markdown")

    col_md, col_steps, col_result = st.columns(3)
    with col_md:
        st.download_button(
            label="📥 Download Markdown",
            data=markdown.encode("utf-8"),
            file_name="lactate_test.md",
            mime="text/markdown",
            use_container_width=True,
        )
    with col_steps:
        st.download_button(
            label="📥 Download Steps CSV",
            data=export_steps_csv(steps),
            file_name="lactate_steps.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col_result:
        st.download_button(
            label="📥 Download Thresholds CSV",
            data=export_result_csv(result),
            file_name="lactate_thresholds.csv",
            mime="text/csv",
            use_container_width=True,
        )


def render_lactate_test_tab(state: StateManager) -> None:
    """Render the whole step test page: editor, actions, results."""
    steps = render_steps_editor(state)

    col_demo, col_reset, col_calc = st.columns(3)
    with col_demo:
        if st.button("🧪 Populate Demo Test", key="demo_button", use_container_width=True):
            state.load_demo()
            st.rerun()
    with col_reset:
        if st.button("🗑️ Reset", key="reset_button", use_container_width=True):
            state.reset()
            st.rerun()
    with col_calc:
        if st.button("🔍 Calculate Thresholds", key="calculate_button", type="primary",
                     use_container_width=True):
            state.set_outcome(calculate_thresholds(steps), steps)

    outcome = state.get_outcome()
    if outcome is None:
        return

    if not state.is_outcome_current(steps):
        st.info("The table changed since the last calculation. Press 'Calculate Thresholds' again.")
        return

    if not outcome.ok:
        st.error(outcome.error)
        return

    render_results(steps, outcome.result)
    render_export(steps, outcome.result)
