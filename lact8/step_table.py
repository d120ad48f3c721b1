"""Step table model: row creation and the pandas bridge for the editor."""
import itertools
import logging
from typing import Callable, Iterable, List

import numpy as np
import pandas as pd

from lact8.calculations.lactate import Step
from lact8.config import Config

logger = logging.getLogger(__name__)

STEP_FIELDS = ("intensity", "heart_rate_bpm", "lactate_mmol_l")
TABLE_COLUMNS = ["id", *STEP_FIELDS]

# Canonical demo test: cycling power [W], HR [bpm], lactate [mmol/L]
DEMO_STEPS = [
    (200, 103, 1.0),
    (220, 111, 0.9),
    (240, 111, 1.0),
    (260, 115, 1.2),
    (280, 118, 1.6),
    (300, 123, 2.2),
    (320, 128, 3.0),
    (340, 135, 4.1),
    (360, 150, 7.0),
    (380, 170, 11.0),
    (400, 188, 15.0),
]


class StepIdGenerator:
    """Hands out unique step ids for one session. Ids are never reused."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)


IdGenerator = Callable[[], int]


def make_step(id_gen: IdGenerator, intensity: float = 0.0, heart_rate_bpm: float = 0.0,
              lactate_mmol_l: float = 0.0) -> Step:
    return Step(id=id_gen(), intensity=float(intensity), heart_rate_bpm=float(heart_rate_bpm),
                lactate_mmol_l=float(lactate_mmol_l))


def make_empty_steps(id_gen: IdGenerator, count: int = Config.INITIAL_EMPTY_STEPS) -> List[Step]:
    """Blank rows for a fresh session."""
    return [make_step(id_gen) for _ in range(count)]


def make_demo_steps(id_gen: IdGenerator) -> List[Step]:
    return [make_step(id_gen, w, hr, la) for w, hr, la in DEMO_STEPS]


def steps_to_dataframe(steps: Iterable[Step]) -> pd.DataFrame:
    """Steps in table order as a DataFrame (one row per step)."""
    return pd.DataFrame([s.to_dict() for s in steps], columns=TABLE_COLUMNS)


def _cell_to_float(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if np.isnan(number) else number


def dataframe_to_steps(df: pd.DataFrame, id_gen: IdGenerator) -> List[Step]:
    """
    Convert edited table rows back to steps.

    Empty cells become 0.0 (placeholder rows are filtered at calculation
    time). Rows added in the editor have no id yet and get a fresh one.
    """
    steps = []
    if df is None or df.empty:
        return steps

    for row in df.to_dict("records"):
        raw_id = row.get("id")
        if raw_id is None or pd.isna(raw_id):
            step_id = id_gen()
            logger.debug(f"Assigned id {step_id} to new table row")
        else:
            step_id = int(raw_id)
        steps.append(Step(
            id=step_id,
            intensity=_cell_to_float(row.get("intensity")),
            heart_rate_bpm=_cell_to_float(row.get("heart_rate_bpm")),
            lactate_mmol_l=_cell_to_float(row.get("lactate_mmol_l")),
        ))
    return steps
