from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def recip(value: float) -> float:
    """IEEE reciprocal: `1/0` is a signed infinity instead of an exception."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value
