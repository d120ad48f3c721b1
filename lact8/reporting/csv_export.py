"""
CSV export utilities for Lact8 step tests.

Provides two export functions:
- export_steps_csv  : the step table sorted by intensity
- export_result_csv : flat LT1/LT2 summary of a ThresholdResult

Both return bytes ready for Streamlit's st.download_button.
"""

from io import StringIO
from typing import Sequence

import pandas as pd

from lact8.calculations.lactate import Step, ThresholdResult

STEP_COLUMNS = ["step", "intensity", "heart_rate_bpm", "lactate_mmol_l"]
RESULT_COLUMNS = ["threshold", "intensity", "heart_rate_bpm", "lactate_mmol_l"]


def _to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def export_steps_csv(steps: Sequence[Step]) -> bytes:
    """
    Serialize the steps to CSV bytes, sorted by intensity and numbered from 1.

    The internal step id is not exported.

    Args:
        steps: Steps as entered in the table.

    Returns:
        UTF-8 encoded CSV bytes.
    """
    rows = [
        {
            "step": i,
            "intensity": s.intensity,
            "heart_rate_bpm": s.heart_rate_bpm,
            "lactate_mmol_l": s.lactate_mmol_l,
        }
        for i, s in enumerate(sorted(steps, key=lambda s: s.intensity), start=1)
    ]
    return _to_csv_bytes(pd.DataFrame(rows, columns=STEP_COLUMNS))


def export_result_csv(result: ThresholdResult) -> bytes:
    """
    Serialize LT1/LT2 to a small CSV, one row per threshold.

    A missing LT2 is written as a row with empty values so the file
    always has the same shape.
    """
    rows = []
    for name, step in (("LT1", result.lt1), ("LT2", result.lt2)):
        rows.append({
            "threshold": name,
            "intensity": step.intensity if step else None,
            "heart_rate_bpm": step.heart_rate_bpm if step else None,
            "lactate_mmol_l": step.lactate_mmol_l if step else None,
        })
    return _to_csv_bytes(pd.DataFrame(rows, columns=RESULT_COLUMNS))
