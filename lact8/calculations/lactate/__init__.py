"""
Lactate Threshold Module

LT1/LT2 detection for incremental step tests with blood lactate samples.

Usage:
    from lact8.calculations.lactate import Step, detect_lactate_thresholds

    result = detect_lactate_thresholds(steps)
    print(result.lt1.intensity, result.lt2.intensity if result.lt2 else None)
"""

from .types import Step, ThresholdResult
from .constants import LACTATE_RANGE, LACTATE_RISE_THRESHOLD, MIN_VALID_STEPS, RISE_DECIMALS
from .errors import (
    LactateValidationError,
    InsufficientDataError,
    InvalidFieldError,
    NonMonotonicIntensityError,
    NoProgressionError,
    LT1NotFoundError,
)
from .geometry import point_to_line_distance, distances_to_line
from .validation import (
    filter_valid_steps,
    is_valid_step,
    lactate_rises,
    validate_step_fields,
    sort_by_intensity,
    check_strict_ordering,
    has_lactate_progression,
)
from .detector import (
    detect_lactate_thresholds,
    find_lt1_index,
    find_peak_lactate_step,
    find_lt2_index,
)

__all__ = [
    "Step",
    "ThresholdResult",
    "LACTATE_RANGE",
    "LACTATE_RISE_THRESHOLD",
    "MIN_VALID_STEPS",
    "RISE_DECIMALS",
    "LactateValidationError",
    "InsufficientDataError",
    "InvalidFieldError",
    "NonMonotonicIntensityError",
    "NoProgressionError",
    "LT1NotFoundError",
    "point_to_line_distance",
    "distances_to_line",
    "filter_valid_steps",
    "is_valid_step",
    "lactate_rises",
    "validate_step_fields",
    "sort_by_intensity",
    "check_strict_ordering",
    "has_lactate_progression",
    "detect_lactate_thresholds",
    "find_lt1_index",
    "find_peak_lactate_step",
    "find_lt2_index",
]
