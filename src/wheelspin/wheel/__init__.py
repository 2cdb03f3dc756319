"""Bonus wheel outcome engine."""

from wheelspin.wheel.segments import (
    NO_OUTCOME,
    REFERENCE_WHEEL,
    SpinOutcome,
    WheelSegment,
)
from wheelspin.wheel.selector import RandomSource, find_band, select, total_weight, weight_bands
from wheelspin.wheel.resolver import DEFAULT_JITTER_DEG, WheelOutcomeResolver

__all__ = [
    "NO_OUTCOME",
    "REFERENCE_WHEEL",
    "SpinOutcome",
    "WheelSegment",
    "RandomSource",
    "find_band",
    "select",
    "total_weight",
    "weight_bands",
    "DEFAULT_JITTER_DEG",
    "WheelOutcomeResolver",
]
