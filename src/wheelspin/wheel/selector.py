"""Weighted random selection over cumulative weight bands.

Each weight owns the half-open band [running, running + weight) of the
prefix sums, in order. A target in [0, total) therefore lands in
exactly one band; zero-weight entries own an empty band and can never
be selected.
"""

import logging
import random
from typing import Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw an integer from [start, stop)."""

    def randrange(self, start: int, stop: int) -> int: ...


_default_rng = random.Random()


def total_weight(weights: Sequence[int]) -> int:
    return sum(weights)


def weight_bands(weights: Sequence[int]) -> list[tuple[int, int]]:
    """Half-open (low, high) band for each weight, in order."""
    bands = []
    running = 0
    for weight in weights:
        bands.append((running, running + weight))
        running += weight
    return bands


def find_band(weights: Sequence[int], target: int) -> Optional[int]:
    """Index of the band containing target, or None when it is outside all bands."""
    running = 0
    for index, weight in enumerate(weights):
        if running <= target < running + weight:
            logger.debug(f"Band match {running} <= {target} < {running + weight}")
            return index
        running += weight
    return None


def select(
    weights: Sequence[int],
    forced: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Optional[int]:
    """Select an index with probability proportional to its weight.

    Args:
        weights: Non-negative weights, one per candidate
        forced: Target weight to use instead of a random draw; None or
            any negative value draws randomly
        rng: Random source; defaults to a module-level random.Random

    Returns:
        The selected index, or None when the target falls outside every
        band (a forced value >= total, or an all-zero weight list)
    """
    total = total_weight(weights)

    if forced is not None and forced >= 0:
        target = forced
    elif total > 0:
        target = (rng or _default_rng).randrange(0, total)
    else:
        logger.warning("Cannot draw from an empty or zero-weight table")
        return None

    logger.debug(f"Weighted draw: total={total} target={target}")
    return find_band(weights, target)
