import logging

import streamlit as st

# --- MODULE IMPORTS ---
from lact8.config import Config
from lact8.frontend.state import StateManager
from lact8.frontend.theme import ThemeManager
from lact8.ui.lactate_test import render_lactate_test_tab

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

ThemeManager.apply()

# --- SESSION STATE INIT ---
state = StateManager()
state.init_session_state()

# --- APP START ---

st.title(f"{Config.APP_ICON} {Config.APP_TITLE}")
st.markdown(
    "Enter intensity, heart rate and blood lactate for each step of an incremental test, "
    "then calculate the first (LT1) and second (LT2) lactate thresholds."
)

render_lactate_test_tab(state)
