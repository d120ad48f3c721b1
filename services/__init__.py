"""
Services (Business Logic Layer).

Keeps the Streamlit layer free of calculation and validation logic.
"""

from .data_validation import validate_step_table
from .threshold_service import ThresholdOutcome, calculate_thresholds

__all__ = [
    "validate_step_table",
    "ThresholdOutcome",
    "calculate_thresholds",
]
