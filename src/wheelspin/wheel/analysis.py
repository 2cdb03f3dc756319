"""Payout analysis for a wheel table.

Exact figures come straight from the weights; `simulate` runs the real
selector many times so its empirical frequencies can be checked against
them.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from wheelspin.wheel.segments import WheelSegment, segment_weights
from wheelspin.wheel.selector import select

logger = logging.getLogger(__name__)


@dataclass
class SimulationReport:
    """Outcome of a Monte Carlo run."""

    spins: int
    hits: NDArray[np.int64]
    misses: int
    total_credits: int

    @property
    def frequencies(self) -> NDArray[np.float64]:
        return self.hits / max(1, self.spins)

    @property
    def mean_credits(self) -> float:
        return self.total_credits / max(1, self.spins)


def hit_probabilities(segments: Sequence[WheelSegment]) -> NDArray[np.float64]:
    """Probability of each segment winning (weight / total)."""
    weights = np.asarray(segment_weights(segments), dtype=np.float64)
    total = weights.sum()
    if total <= 0:
        return np.zeros_like(weights)
    return weights / total


def expected_credits(segments: Sequence[WheelSegment]) -> float:
    """Mean credits paid per spin."""
    credits = np.asarray([s.credits for s in segments], dtype=np.float64)
    return float(np.dot(hit_probabilities(segments), credits))


def credit_distribution(segments: Sequence[WheelSegment]) -> dict[int, float]:
    """Probability of each distinct prize, merging wedges that pay the same."""
    distribution: dict[int, float] = {}
    for segment, p in zip(segments, hit_probabilities(segments)):
        distribution[segment.credits] = distribution.get(segment.credits, 0.0) + float(p)
    return dict(sorted(distribution.items()))


def simulate(
    segments: Sequence[WheelSegment],
    spins: int = 10_000,
    seed: Optional[int] = None,
) -> SimulationReport:
    """Run the weighted selector `spins` times."""
    rng = random.Random(seed)
    weights = segment_weights(segments)
    hits = np.zeros(len(segments), dtype=np.int64)
    misses = 0
    total = 0

    for _ in range(spins):
        index = select(weights, rng=rng)
        if index is None:
            misses += 1
            continue
        hits[index] += 1
        total += segments[index].credits

    logger.info(f"Simulated {spins} spins, mean {total / max(1, spins):.1f} credits")
    return SimulationReport(spins=spins, hits=hits, misses=misses, total_credits=total)
