"""
Frontend State Management.

Centralized state manager to handle Session State with type safety.
"""
from typing import List, Optional

import streamlit as st

from lact8.calculations.lactate import Step
from lact8.step_table import StepIdGenerator, make_demo_steps, make_empty_steps
from services.threshold_service import ThresholdOutcome

class StateManager:
    """Manages the step table and the last calculation of one session."""

    ID_GEN_KEY = "step_id_gen"
    STEPS_KEY = "steps"
    EDITOR_VERSION_KEY = "steps_editor_version"
    OUTCOME_KEY = "threshold_outcome"
    OUTCOME_STEPS_KEY = "threshold_outcome_steps"

    def init_session_state(self) -> None:
        """Initialize session state with empty rows on first run."""
        if self.ID_GEN_KEY not in st.session_state:
            st.session_state[self.ID_GEN_KEY] = StepIdGenerator()

        if self.STEPS_KEY not in st.session_state:
            st.session_state[self.STEPS_KEY] = make_empty_steps(self.id_gen)

        if self.EDITOR_VERSION_KEY not in st.session_state:
            st.session_state[self.EDITOR_VERSION_KEY] = 0

    @property
    def id_gen(self) -> StepIdGenerator:
        return st.session_state[self.ID_GEN_KEY]

    @property
    def editor_key(self) -> str:
        # A new key gives the data editor a fresh base table
        return f"steps_editor_{st.session_state[self.EDITOR_VERSION_KEY]}"

    def get_steps(self) -> List[Step]:
        return list(st.session_state[self.STEPS_KEY])

    def set_steps(self, steps: List[Step]) -> None:
        """Replace the table contents and reset the editor."""
        st.session_state[self.STEPS_KEY] = list(steps)
        st.session_state[self.EDITOR_VERSION_KEY] += 1

    def load_demo(self) -> None:
        self.set_steps(make_demo_steps(self.id_gen))
        self.clear_outcome()

    def reset(self) -> None:
        self.set_steps(make_empty_steps(self.id_gen))
        self.clear_outcome()

    def set_outcome(self, outcome: ThresholdOutcome, steps: List[Step]) -> None:
        st.session_state[self.OUTCOME_KEY] = outcome
        st.session_state[self.OUTCOME_STEPS_KEY] = list(steps)

    def get_outcome(self) -> Optional[ThresholdOutcome]:
        return st.session_state.get(self.OUTCOME_KEY)

    def is_outcome_current(self, steps: List[Step]) -> bool:
        """True if the stored outcome was calculated from these exact values."""
        return st.session_state.get(self.OUTCOME_STEPS_KEY) == list(steps)

    def clear_outcome(self) -> None:
        for key in (self.OUTCOME_KEY, self.OUTCOME_STEPS_KEY):
            if key in st.session_state:
                del st.session_state[key]
