"""
Weight -> visual parameter mapping for the dive board

A word's weight (1..999) is normalized to [0, 1] and then mapped to a font
size, a replication count and an animation duration. Nothing here raises:
malformed weights are clamped and truncated instead.
"""

import math
from typing import Any, NamedTuple

MIN_WEIGHT = 1
MAX_WEIGHT = 999
MIN_FONT_REM = 1.5
FONT_SPAN_REM = 3.0
MAX_EXTRA_COPIES = 5
MAX_DENSITY = 10.0


class SpeedRange(NamedTuple):
    """Animation duration bounds in seconds."""

    min: float = 14.0
    max: float = 28.0


DEFAULT_SPEED_RANGE = SpeedRange()


def round_half_up(value: float) -> int:
    """Round .5 toward +infinity (Python's round() would go to even)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _coerce_weight(weight: Any) -> int:
    try:
        value = float(weight)
    except (TypeError, ValueError):
        return MIN_WEIGHT
    if math.isnan(value):
        return MIN_WEIGHT
    # clamp before trunc so infinities don't overflow
    return math.trunc(clamp(value, MIN_WEIGHT, MAX_WEIGHT))


def norm(weight: Any) -> float:
    """Normalize a weight into [0, 1]; 1 -> 0.0, 999 -> 1.0."""
    return (_coerce_weight(weight) - MIN_WEIGHT) / (MAX_WEIGHT - MIN_WEIGHT)


def font_size(weight: Any) -> float:
    """Font size in rem, 1.5 .. 4.5."""
    return MIN_FONT_REM + norm(weight) * FONT_SPAN_REM


def coerce_density(density: Any) -> float:
    """Density as a float in [0, MAX_DENSITY]; non-numbers and NaN become 1.0."""
    try:
        density = float(density)
    except (TypeError, ValueError):
        return 1.0
    if math.isnan(density):
        return 1.0
    return clamp(density, 0.0, MAX_DENSITY)


def frequency(weight: Any, density: float = 1.0) -> int:
    """How many copies of a word the board shows; never below 1."""
    copies = 1 + round_half_up(norm(weight) * MAX_EXTRA_COPIES)
    return max(1, round_half_up(copies * coerce_density(density)))


def duration(weight: Any, speed_range: SpeedRange = DEFAULT_SPEED_RANGE) -> float:
    """Seconds for one pass across the board; heavier words move a little slower."""
    t = norm(weight)
    low, high = speed_range
    return low + (1 - 0.75 * (1 - t)) * (high - low)
