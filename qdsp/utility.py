"""Sample conversion, power-of-two sizing and buffer interpolation helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def to_float(s: float, resolution: int) -> float:
    """Convert an offset-binary sample of the given resolution to -1.0..1.0."""
    half_resolution = float(resolution // 2)
    return (s / half_resolution) - 1.0


def from_float(s: float, resolution: int) -> int:
    """Convert a -1.0..1.0 sample to an offset-binary integer sample."""
    half_resolution = resolution // 2
    return int((s * (half_resolution - 1)) + half_resolution)


def smallest_pow2(n: int) -> int:
    """Return the smallest power of two that is greater than or equal to n."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def linear_interpolate(y1: float, y2: float, mu: float) -> float:
    """Interpolate between y1 and y2; mu runs from 0.0 (y1) to 1.0 (y2)."""
    return y1 + mu * (y2 - y1)


def interpolate_none(buffer: Sequence[float], index: float) -> float:
    """Read the sample at the integer part of a fractional index."""
    return buffer[int(index)]


def interpolate_linear(buffer: Sequence[float], index: float) -> float:
    """Read a sample at a fractional index using linear interpolation."""
    position = int(index)
    mu = index - math.floor(index)
    return linear_interpolate(buffer[position], buffer[position + 1], mu)