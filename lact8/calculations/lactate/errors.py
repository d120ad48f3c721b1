"""
Lactate Validation Errors

Every failure is a local data problem reported once per calculation.
The message is meant to be shown to the user as-is.
"""

from typing import Any, Optional


class LactateValidationError(ValueError):
    """Base error for step data that cannot be used for threshold detection."""

    code = "invalid_data"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InsufficientDataError(LactateValidationError):
    code = "insufficient_data"


class InvalidFieldError(LactateValidationError):
    """A numeric field of one step is non-finite or out of its range."""

    code = "invalid_field"

    def __init__(self, message: str, step: Any = None, field: Optional[str] = None,
                 row: Optional[int] = None):
        super().__init__(message)
        self.step = step
        self.field = field
        self.row = row


class NonMonotonicIntensityError(LactateValidationError):
    """Sorted intensities are not strictly increasing (duplicates)."""

    code = "non_monotonic_intensity"

    def __init__(self, message: str, index_pair: Optional[tuple] = None):
        super().__init__(message)
        self.index_pair = index_pair


class NoProgressionError(LactateValidationError):
    code = "no_progression"


class LT1NotFoundError(LactateValidationError):
    code = "lt1_not_found"
