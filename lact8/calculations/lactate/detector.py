"""
Lactate Threshold Detector Module

Detects LT1 (first rise above baseline) and LT2 (maximum deviation from
the LT1 -> peak lactate chord) from an incremental step test.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .constants import LACTATE_RISE_THRESHOLD, MIN_VALID_STEPS
from .errors import LT1NotFoundError, NoProgressionError
from .geometry import distances_to_line
from .types import Step, ThresholdResult
from .validation import (
    check_strict_ordering,
    ensure_step_sequence,
    filter_valid_steps,
    has_lactate_progression,
    is_valid_step,
    lactate_rises,
    sort_by_intensity,
    validate_step_fields,
)

logger = logging.getLogger("Lact8.ThresholdDetector")


def find_lt1_index(ordered: Sequence[Step], rise_threshold: float = LACTATE_RISE_THRESHOLD) -> int:
    """
    Find LT1 as the first interior step next to a lactate rise.

    Scans indexes 1..n-2 in ascending intensity and returns the first one
    where the rise from the previous step or to the next step exceeds
    ``rise_threshold``.

    Raises:
        LT1NotFoundError: no interior step qualifies.
    """
    for i in range(1, len(ordered) - 1):
        prev = ordered[i - 1].lactate_mmol_l
        current = ordered[i].lactate_mmol_l
        nxt = ordered[i + 1].lactate_mmol_l

        if lactate_rises(prev, current, rise_threshold) or lactate_rises(current, nxt, rise_threshold):
            return i

    raise LT1NotFoundError("Could not identify LT1 - check data progression")


def find_peak_lactate_step(ordered: Sequence[Step]) -> Step:
    """Step with the highest lactate; on a plateau the highest intensity wins."""
    peak = ordered[0]
    for step in ordered[1:]:
        if step.lactate_mmol_l > peak.lactate_mmol_l or (
            step.lactate_mmol_l == peak.lactate_mmol_l and step.intensity > peak.intensity
        ):
            peak = step
    return peak


def find_lt2_index(ordered: Sequence[Step], lt1_index: int, peak: Step) -> Optional[int]:
    """
    Find LT2 as the step farthest from the LT1 -> peak line.

    Only steps strictly between the two anchor intensities are candidates.
    Ties keep the lowest intensity.

    Returns:
        Index into ``ordered`` or None if there is no candidate.
    """
    lt1 = ordered[lt1_index]
    x1, y1 = lt1.intensity, lt1.lactate_mmol_l
    x2, y2 = peak.intensity, peak.lactate_mmol_l
    low, high = min(x1, x2), max(x1, x2)

    candidates = [i for i, s in enumerate(ordered) if low < s.intensity < high]
    if not candidates:
        return None

    xs = np.array([ordered[i].intensity for i in candidates], dtype=float)
    ys = np.array([ordered[i].lactate_mmol_l for i in candidates], dtype=float)
    distances = distances_to_line(x1, y1, x2, y2, xs, ys)

    # argmax returns the first maximum
    return candidates[int(np.argmax(distances))]


def detect_lactate_thresholds(steps: Sequence[Step]) -> ThresholdResult:
    """
    Detect LT1 and LT2 from a batch of test steps.

    The input is never modified. Zero or empty placeholder rows are
    ignored. LT2 may be None; that is a valid outcome, not an error.

    Args:
        steps: Steps in any order (usually creation order from the editor)

    Returns:
        ThresholdResult referencing the selected Step objects

    Raises:
        LactateValidationError: (or a subclass) for unusable data
    """
    ensure_step_sequence(steps)

    valid = filter_valid_steps(steps, MIN_VALID_STEPS)
    # Rows are numbered as entered so the message points at the table
    for row, step in enumerate(steps, start=1):
        if is_valid_step(step):
            validate_step_fields(step, row=row)

    ordered = sort_by_intensity(valid)
    check_strict_ordering(ordered)

    if not has_lactate_progression(ordered, LACTATE_RISE_THRESHOLD):
        raise NoProgressionError(
            "Unable to detect lactate threshold - insufficient lactate progression"
        )

    lt1_index = find_lt1_index(ordered, LACTATE_RISE_THRESHOLD)
    peak = find_peak_lactate_step(ordered)
    lt2_index = find_lt2_index(ordered, lt1_index, peak)

    lt1 = ordered[lt1_index]
    lt2 = ordered[lt2_index] if lt2_index is not None else None

    logger.debug(
        "LT1 at intensity %s (%.2f mmol/L), LT2 %s, %d steps analyzed",
        lt1.intensity, lt1.lactate_mmol_l,
        f"at intensity {lt2.intensity}" if lt2 else "not found",
        len(ordered),
    )

    return ThresholdResult(lt1=lt1, lt2=lt2, peak=peak, steps_analyzed=len(ordered))
