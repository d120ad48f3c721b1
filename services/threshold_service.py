"""
Threshold Service

Runs lactate threshold detection for the UI and turns validation failures
into a displayable outcome instead of an exception.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from lact8.calculations.lactate import (
    LactateValidationError,
    Step,
    ThresholdResult,
    detect_lactate_thresholds,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThresholdOutcome:
    """Either a result or an error message, never both."""
    result: Optional[ThresholdResult] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: ThresholdResult) -> "ThresholdOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: LactateValidationError) -> "ThresholdOutcome":
        return cls(error=error.message, error_code=error.code)


def calculate_thresholds(steps: Sequence[Step]) -> ThresholdOutcome:
    """Detect LT1/LT2 for the given steps.

    Only data validation errors are converted into a failed outcome;
    anything else is a bug and propagates.

    Args:
        steps: Steps as entered in the table

    Returns:
        ThresholdOutcome with either ``result`` or ``error`` set
    """
    try:
        result = detect_lactate_thresholds(steps)
    except LactateValidationError as e:
        logger.warning(f"Threshold calculation rejected ({e.code}): {e.message}")
        return ThresholdOutcome.failure(e)

    logger.info(
        f"Thresholds calculated from {result.steps_analyzed} steps: "
        f"LT1={result.lt1.intensity}, LT2={result.lt2.intensity if result.lt2 else None}"
    )
    return ThresholdOutcome.success(result)
