"""
Lactate Step Validation Module

Pure checks run before threshold detection. Each check either returns
the data it was given (filtered/sorted) or raises a LactateValidationError.
"""

import math
from collections.abc import Sequence
from numbers import Real
from typing import List, Optional

from .constants import LACTATE_RANGE, LACTATE_RISE_THRESHOLD, MIN_VALID_STEPS, RISE_DECIMALS
from .errors import (
    LactateValidationError,
    InsufficientDataError,
    InvalidFieldError,
    NonMonotonicIntensityError,
)
from .types import Step


def _is_positive(value) -> bool:
    # Non-numeric cells are treated like empty placeholder rows
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


def is_valid_step(step: Step) -> bool:
    """A step takes part in the calculation when intensity and lactate are positive."""
    return _is_positive(step.intensity) and _is_positive(step.lactate_mmol_l)


def lactate_rises(previous: float, current: float, rise_threshold: float = LACTATE_RISE_THRESHOLD) -> bool:
    """True if lactate rises by more than ``rise_threshold`` from ``previous`` to ``current``."""
    return round(current - previous, RISE_DECIMALS) > rise_threshold


def ensure_step_sequence(steps) -> Sequence:
    """Reject anything that is not an ordered sequence of Step objects."""
    if isinstance(steps, (str, bytes)) or not isinstance(steps, Sequence):
        raise LactateValidationError(
            "Invalid steps data: expected a sequence of steps", code="not_a_sequence"
        )
    for step in steps:
        if not isinstance(step, Step):
            raise LactateValidationError(
                f"Invalid steps data: expected Step objects, got {type(step).__name__}",
                code="not_a_sequence",
            )
    return steps


def filter_valid_steps(steps: Sequence, min_steps: int = MIN_VALID_STEPS) -> List[Step]:
    """
    Keep steps with positive intensity and positive lactate.

    Raises:
        InsufficientDataError: fewer than ``min_steps`` steps remain.
    """
    valid = [s for s in steps if is_valid_step(s)]
    if len(valid) < min_steps:
        raise InsufficientDataError(
            f"Please add at least {min_steps} valid data points to calculate thresholds"
        )
    return valid


def validate_step_fields(step: Step, row: Optional[int] = None) -> None:
    """
    Check the numeric fields of a single valid step.

    Args:
        step: Step to check
        row: 1-based table row of the step, used in the message

    Raises:
        InvalidFieldError: naming the offending step and field.
    """
    where = f"row {row}" if row is not None else f"step id {step.id}"

    def fail(message: str, field: str):
        raise InvalidFieldError(f"{message} ({where})", step=step, field=field, row=row)

    if not math.isfinite(step.intensity):
        fail(f"Invalid intensity value: {step.intensity}", "intensity")
    if not math.isfinite(step.lactate_mmol_l):
        fail(f"Invalid lactate value: {step.lactate_mmol_l}", "lactate_mmol_l")
    low, high = LACTATE_RANGE
    if step.lactate_mmol_l < low or step.lactate_mmol_l > high:
        fail(f"Lactate value out of range ({low:g}-{high:g}): {step.lactate_mmol_l}", "lactate_mmol_l")
    if step.intensity <= 0:
        fail(f"Intensity must be greater than 0: {step.intensity}", "intensity")


def sort_by_intensity(steps: Sequence) -> List[Step]:
    """Return a new list sorted ascending by intensity (stable)."""
    return sorted(steps, key=lambda s: s.intensity)


def check_strict_ordering(ordered: Sequence) -> None:
    """
    Require strictly increasing intensity across the sorted steps.

    Raises:
        NonMonotonicIntensityError: at the first tie or inversion.
    """
    for i in range(1, len(ordered)):
        if ordered[i].intensity <= ordered[i - 1].intensity:
            raise NonMonotonicIntensityError(
                f"Steps must be in ascending order by intensity. Check steps {i} and {i + 1}",
                index_pair=(i - 1, i),
            )


def has_lactate_progression(ordered: Sequence, rise_threshold: float = LACTATE_RISE_THRESHOLD) -> bool:
    """True if any adjacent pair rises by more than ``rise_threshold``."""
    return any(
        lactate_rises(ordered[i - 1].lactate_mmol_l, ordered[i].lactate_mmol_l, rise_threshold)
        for i in range(1, len(ordered))
    )
