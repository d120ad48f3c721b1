"""
Frontend Components Module.

Reusable UI components (widgets) for the application.
"""
import streamlit as st
from typing import Optional

from lact8.calculations.lactate import Step
from lact8.reporting import format_number

class UIComponents:
    """Namespace for reusable UI components."""

    @staticmethod
    def threshold_card_html(title: str, step: Optional[Step], color: str) -> str:
        """HTML for one threshold summary card ("Not found" without a step)."""
        if step is None:
            body = '<div class="not-found">Not found</div>'
        else:
            body = f'''
                <div class="metric-row">
                    <div class="metric-box">
                        <div class="label">Intensity</div>
                        <div class="value">{format_number(step.intensity)}</div>
                    </div>
                    <div class="metric-box">
                        <div class="label">Heart Rate</div>
                        <div class="value">{format_number(step.heart_rate_bpm)} <span class="unit">bpm</span></div>
                    </div>
                    <div class="metric-box">
                        <div class="label">Lactate</div>
                        <div class="value">{format_number(step.lactate_mmol_l)} <span class="unit">mmol/L</span></div>
                    </div>
                </div>
            '''
        return f'''
        <div class="threshold-card" style="border-left-color: {color};">
            <h4>{title}</h4>
            {body}
        </div>
        '''

    @staticmethod
    def render_threshold_card(title: str, step: Optional[Step], color: str) -> None:
        st.markdown(UIComponents.threshold_card_html(title, step, color), unsafe_allow_html=True)
