"""Maps a weighted draw to a prize and a wheel stop angle."""

import logging
import math
import random
from typing import Optional, Sequence

from wheelspin.wheel.segments import NO_OUTCOME, SpinOutcome, WheelSegment, segment_weights
from wheelspin.wheel.selector import RandomSource, select

logger = logging.getLogger(__name__)

# 8 wedges are 45 degrees wide; 21 either side of the anchor keeps the
# pointer 3 degrees clear of the dark seam between wedges.
DEFAULT_JITTER_DEG = 21


class WheelOutcomeResolver:
    """Resolves spins for a segmented wheel.

    The same random source drives both the band draw and the stop angle
    jitter, so a seeded `random.Random` makes whole spins reproducible.
    """

    def __init__(self, rng: Optional[RandomSource] = None, jitter_deg: int = DEFAULT_JITTER_DEG):
        self.rng = rng or random.Random()
        self.jitter_deg = jitter_deg

    def resolve(self, segments: Sequence[WheelSegment], forced_weight: int = -1) -> SpinOutcome:
        """Pick the winning segment and where the wheel should stop.

        Args:
            segments: Wheel segments; weights are re-summed on every call
            forced_weight: -1 for a random draw, otherwise the target weight

        Returns:
            The outcome, or the zero outcome if forced_weight matches no band
        """
        weights = segment_weights(segments)
        forced = forced_weight if forced_weight > -1 else None
        index = select(weights, forced=forced, rng=self.rng)

        if index is None:
            logger.warning(
                f"Forced weight {forced_weight} is outside all bands "
                f"(total {sum(weights)}), using zero outcome"
            )
            return NO_OUTCOME

        segment = segments[index]
        return SpinOutcome(
            credits=segment.credits,
            stop_angle_deg=self.stop_angle(segment.angle_deg),
        )

    def stop_angle(self, angle_deg: float) -> float:
        """Jittered stop angle for a segment anchor.

        The wheel turns the opposite way to its angle convention relative
        to the fixed pointer, hence 360 minus the jittered anchor. The draw
        is over whole degrees; a fractional anchor keeps its fraction.
        """
        anchor = math.floor(angle_deg)
        fraction = angle_deg - anchor
        jittered = self.rng.randrange(anchor - self.jitter_deg, anchor + self.jitter_deg) + fraction
        return 360 - jittered
