"""Wheel segment table and spin outcome types."""

from dataclasses import dataclass
from typing import Sequence, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class WheelSegment:
    """One wedge of the prize wheel.

    Attributes:
        angle_deg: Wheel-space anchor angle of the wedge centre (0-360)
        credits: Prize paid when the wedge wins
        weight: Relative probability mass
        tint: Wedge colour
    """

    angle_deg: float
    credits: int
    weight: int
    tint: Color = (255, 255, 255)

    def __post_init__(self):
        if self.credits < 0:
            raise ValueError(f"credits must be >= 0, got {self.credits}")
        if self.weight < 0:
            raise ValueError(f"weight must be >= 0, got {self.weight}")


@dataclass(frozen=True)
class SpinOutcome:
    """Result of one spin.

    `stop_angle_deg` is where the wheel visual must come to rest; it is
    already inverted for the pointer, so rotate to it rather than to
    the segment's anchor angle.
    """

    credits: int
    stop_angle_deg: float


# The zero outcome returned when a forced weight matches no band
NO_OUTCOME = SpinOutcome(credits=0, stop_angle_deg=0)

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)

# 8 wedges, 45 degrees apart, cumulative weight 354
REFERENCE_WHEEL: Tuple[WheelSegment, ...] = (
    WheelSegment(angle_deg=0, credits=5000, weight=4, tint=RED),
    WheelSegment(angle_deg=45, credits=200, weight=100, tint=GREEN),
    WheelSegment(angle_deg=90, credits=1000, weight=20, tint=BLUE),
    WheelSegment(angle_deg=135, credits=400, weight=50, tint=YELLOW),
    WheelSegment(angle_deg=180, credits=2000, weight=10, tint=CYAN),
    WheelSegment(angle_deg=225, credits=200, weight=100, tint=GREEN),
    WheelSegment(angle_deg=270, credits=1000, weight=20, tint=BLUE),
    WheelSegment(angle_deg=315, credits=400, weight=50, tint=YELLOW),
)


def segment_weights(segments: Sequence[WheelSegment]) -> list[int]:
    return [segment.weight for segment in segments]
