"""One-pole and two-pole polyphase allpass filters."""

from __future__ import annotations

import math


def _pivot_coefficient(freq: float, sps: float) -> float:
    return math.tan((math.pi * freq / sps) - 0.25 * math.pi)


class OnePoleAllpass:
    """First order allpass filter; a is the pole location in -1..1."""

    def __init__(self, a: float) -> None:
        self.a = a
        self.y = 0.0

    @classmethod
    def at_frequency(cls, freq: float, sps: float) -> OnePoleAllpass:
        """Allpass with a 90 degree phase shift at freq."""
        return cls(_pivot_coefficient(freq, sps))

    def __call__(self, s: float) -> float:
        out = self.y + self.a * s
        self.y = s - self.a * out
        return out

    def pivot(self, freq: float, sps: float) -> None:
        """Move the 90 degree phase shift point to freq."""
        self.a = _pivot_coefficient(freq, sps)


class PolyphaseAllpass:
    """Two-pole polyphase IIR allpass section."""

    def __init__(self, a: float) -> None:
        self.a = a
        self.x1 = 0.0
        self.x2 = 0.0
        self.y1 = 0.0
        self.y2 = 0.0

    def __call__(self, s: float) -> float:
        r = self.a * (s + self.y2) - self.x2
        self.x2 = self.x1
        self.x1 = s
        self.y2 = self.y1
        self.y1 = r
        return r