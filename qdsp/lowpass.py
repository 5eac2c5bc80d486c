"""Leaky integrators, one-pole and resonant low-pass filters, dynamic smoothing.

Frequencies and sampling rates are plain floats in hertz.
"""

from __future__ import annotations

import math


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class FixedPtLeakyIntegrator:
    """Integer leaky integrator: y += s - y / k.

    The filter gain equals k, so divide the output by k to get the signal
    level. Powers of two are the natural choice for k; 16 is a good start.
    """

    def __init__(self, k: int = 16) -> None:
        if k <= 0:
            raise ValueError(f"k must be a positive integer, got {k}")
        self.k = int(k)
        self.y = 0

    @property
    def gain(self) -> int:
        """The filter gain, equal to k."""
        return self.k

    def __call__(self, s: int) -> int:
        self.y += int(s) - _trunc_div(self.y, self.k)
        return self.y


class LeakyIntegrator:
    """Floating point leaky integrator: y = s + a * (y - s)."""

    def __init__(self, a: float = 0.995) -> None:
        self.a = a
        self.y = 0.0

    @classmethod
    def at_frequency(cls, f: float, sps: float) -> LeakyIntegrator:
        """Leaky integrator with its cutoff at f."""
        integrator = cls(0.0)
        integrator.cutoff(f, sps)
        return integrator

    def __call__(self, s: float) -> float:
        self.y = s + self.a * (self.y - s)
        return self.y

    def cutoff(self, f: float, sps: float) -> None:
        """Move the cutoff to f."""
        self.a = 1.0 - (2.0 * math.pi * f / sps)


class OnePoleLowpass:
    """One pole low-pass filter (6 dB/octave)."""

    def __init__(self, a: float) -> None:
        self.a = a
        self.y = 0.0

    @classmethod
    def at_frequency(cls, freq: float, sps: float) -> OnePoleLowpass:
        """One pole low-pass with its cutoff at freq."""
        lp = cls(0.0)
        lp.cutoff(freq, sps)
        return lp

    def __call__(self, s: float) -> float:
        self.y += self.a * (s - self.y)
        return self.y

    def cutoff(self, freq: float, sps: float) -> None:
        """Move the cutoff to freq."""
        self.a = 1.0 - math.exp(-2.0 * math.pi * freq / sps)


class ResoFilter:
    """Two one-pole low-pass stages with feedback for a resonant peak.

    f is a normalized cutoff from 0.0 up to (but not including) 1.0.
    """

    def __init__(self, f: float, reso: float) -> None:
        self.reso = reso
        self.y0 = 0.0
        self.y1 = 0.0
        self.cutoff(f)

    @classmethod
    def at_frequency(cls, f: float, reso: float, sps: float) -> ResoFilter:
        """Resonant filter with its cutoff at frequency f."""
        return cls(cls._normalize(f, sps), reso)

    @staticmethod
    def _normalize(f: float, sps: float) -> float:
        return 2.0 * math.sin(math.pi * f / sps)

    def _feedback(self, reso: float) -> float:
        if self.f == 1.0:
            raise ValueError("normalized cutoff of 1.0 makes the feedback infinite")
        return reso + reso / (1.0 - self.f)

    def __call__(self, s: float) -> float:
        self.y0 += self.f * (s - self.y0 + self.fb * (self.y0 - self.y1))
        self.y1 += self.f * (self.y0 - self.y1)
        return self.y1

    def cutoff(self, f: float) -> None:
        """Set the normalized cutoff."""
        self.f = f
        self.fb = self._feedback(self.reso)

    def cutoff_frequency(self, f: float, sps: float) -> None:
        """Set the cutoff from a frequency in hertz."""
        self.cutoff(self._normalize(f, sps))

    def resonance(self, reso: float) -> None:
        """Set the resonance amount."""
        self.fb = self._feedback(reso)
        self.reso = reso


class DynamicSmoother:
    """Self-modulating two-pole smoother.

    The band-pass part of the filter raises its own cutoff when the input
    changes quickly, so it tracks fast moves and smooths slow ones.
    """

    def __init__(self, base: float, sps: float, sensitivity: float = 0.5) -> None:
        self.sense = sensitivity * 4.0
        self.low1 = 0.0
        self.low2 = 0.0
        self.base_frequency(base, sps)

    def __call__(self, s: float) -> float:
        low1z = self.low1
        low2z = self.low2
        bandz = low1z - low2z
        g = min(self.g0 + self.sense * abs(bandz), 1.0)
        self.low1 = low1z + g * (s - low1z)
        self.low2 = low2z + g * (self.low1 - low2z)
        return low2z

    def base_frequency(self, base: float, sps: float) -> None:
        """Set the base cutoff frequency."""
        self.wc = base / sps
        gc = math.tan(math.pi * self.wc)
        self.g0 = 2.0 * gc / (1.0 + gc)