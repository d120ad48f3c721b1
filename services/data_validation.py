"""
Data Validation Service

Entry-time checks for the step table. These only warn the user while
typing; the threshold detector does its own validation on calculate.
"""

import pandas as pd
from typing import Tuple
from lact8.config import Config
from lact8.step_table import STEP_FIELDS

def validate_step_table(df: pd.DataFrame) -> Tuple[bool, str]:
    """Validate the edited step table for implausible values.

    Checks for:
    - Required columns
    - Negative values in any numeric column
    - Heart rate above Config.MAX_HEART_RATE
    - Lactate above Config.MAX_LACTATE

    Empty or zero cells are allowed (rows still being typed).

    Args:
        df: DataFrame from the step editor

    Returns:
        Tuple of (is_valid, error_message)
    """
    # 1. Basic Structure
    if df is None or df.empty:
        return True, ""

    cols = df.columns

    # 2. Required Columns
    for req in STEP_FIELDS:
        if req not in cols:
            return False, f"Missing required column: '{req}'"

    # 3. Range Checks
    validation_failures = []
    numeric = df[list(STEP_FIELDS)].apply(pd.to_numeric, errors="coerce")

    for col in STEP_FIELDS:
        if (numeric[col] < 0).any():
            validation_failures.append(f"Column '{col}' contains negative values.")

    max_hr = numeric["heart_rate_bpm"].max()
    if pd.notna(max_hr) and max_hr > Config.MAX_HEART_RATE:
        validation_failures.append(
            f"Heart rate ({max_hr:.0f} bpm) exceeds limit ({Config.MAX_HEART_RATE} bpm)."
        )

    max_la = numeric["lactate_mmol_l"].max()
    if pd.notna(max_la) and max_la > Config.MAX_LACTATE:
        validation_failures.append(
            f"Lactate ({max_la:.1f} mmol/L) exceeds limit ({Config.MAX_LACTATE:g} mmol/L)."
        )

    if validation_failures:
        return False, "Data validation errors:\n" + "\n".join(validation_failures)

    return True, ""
