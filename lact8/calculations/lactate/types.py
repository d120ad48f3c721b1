"""
Lactate Types Module

Data classes for lactate step tests.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class Step:
    """
    One stage of an incremental exercise test.

    Attributes:
        id: Unique identifier, stable across edits
        intensity: Workload marker (power or speed), unit-agnostic
        heart_rate_bpm: Heart rate at the end of the stage [bpm]
        lactate_mmol_l: Blood lactate at the end of the stage [mmol/L]
    """
    id: int
    intensity: float = 0.0
    heart_rate_bpm: float = 0.0
    lactate_mmol_l: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "intensity": self.intensity,
            "heart_rate_bpm": self.heart_rate_bpm,
            "lactate_mmol_l": self.lactate_mmol_l,
        }


@dataclass(frozen=True)
class ThresholdResult:
    """
    Result of LT1/LT2 detection.

    lt1, lt2 and peak are the Step objects passed to the detector,
    not copies. lt2 is None when no step lies between LT1 and the peak.
    """
    lt1: Step
    lt2: Optional[Step] = None
    peak: Optional[Step] = None
    steps_analyzed: int = 0

    @property
    def has_lt2(self) -> bool:
        return self.lt2 is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "lt1": self.lt1.to_dict(),
            "lt2": self.lt2.to_dict() if self.lt2 else None,
            "peak": self.peak.to_dict() if self.peak else None,
            "steps_analyzed": self.steps_analyzed,
        }
