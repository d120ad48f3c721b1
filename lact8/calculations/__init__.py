"""
Calculation package.

Groups the pure calculation code by responsibility:
- lactate/: LT1/LT2 detection for blood lactate step tests

Everything public is re-exported here.
Import: from lact8.calculations import detect_lactate_thresholds
"""

from .lactate import (
    Step,
    ThresholdResult,
    LactateValidationError,
    detect_lactate_thresholds,
)

__all__ = [
    "Step",
    "ThresholdResult",
    "LactateValidationError",
    "detect_lactate_thresholds",
]
