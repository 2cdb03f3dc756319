"""Easing functions for tweens.

All functions take a normalized time t (0.0 to 1.0) and return a
normalized value. Names follow the GSAP-style curves the screens use
("sine.out" for the wheel slow-down, "linear" for fades and the glow).
"""

from enum import Enum, auto
from typing import Callable
import math


class Easing(Enum):
    """Available easing function types."""

    LINEAR = auto()
    EASE_OUT_SINE = auto()


EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_out_sine(t: float) -> float:
    """Decelerate using sine curve (the wheel slow-down)."""
    return math.sin((t * math.pi) / 2)


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_SINE: ease_out_sine,
}

# "ease_out_sine" and the short "sine.out" form both resolve
_EASING_BY_NAME: dict[str, Easing] = {e.name.lower(): e for e in Easing}
_EASING_BY_NAME["sine.out"] = Easing.EASE_OUT_SINE


def get_easing(easing: Easing | str) -> EasingFunc:
    """Get an easing function by enum or name.

    Raises:
        ValueError: If easing name is not recognized
    """
    if isinstance(easing, str):
        easing_enum = _EASING_BY_NAME.get(easing.lower())
        if easing_enum is None:
            raise ValueError(f"Unknown easing function: {easing}")
        easing = easing_enum

    return _EASING_FUNCTIONS[easing]


def interpolate(start: float, end: float, t: float, easing: Easing | str = Easing.LINEAR) -> float:
    """Interpolate between two values using an easing function."""
    easing_func = get_easing(easing)
    eased_t = easing_func(max(0.0, min(1.0, t)))
    return start + (end - start) * eased_t


def interpolate_color(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    t: float,
    easing: Easing | str = Easing.LINEAR
) -> tuple[int, int, int]:
    """Interpolate between two RGB colors."""
    return (
        int(interpolate(start[0], end[0], t, easing)),
        int(interpolate(start[1], end[1], t, easing)),
        int(interpolate(start[2], end[2], t, easing)),
    )
