"""Biquad filters designed from the Audio-EQ Cookbook formulas.

Frequencies and sampling rates are plain floats in hertz. Wherever a filter
accepts either a Q factor or a bandwidth, pass a :class:`Bandwidth` to mean
bandwidth in octaves and a plain number to mean Q.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

_DEFAULT_Q = 0.707


@dataclass(frozen=True)
class Bandwidth:
    """A filter bandwidth in octaves, as opposed to a Q factor."""

    val: float


class Biquad:
    """Direct form I biquad with normalized coefficients.

    a0, a1, a2 weight the current and two previous inputs; a3 and a4 weight
    the two previous outputs (subtracted).
    """

    def __init__(self, a0: float, a1: float, a2: float, a3: float, a4: float) -> None:
        self._set_coefficients(a0, a1, a2, a3, a4)
        self.x1 = 0.0
        self.x2 = 0.0
        self.y1 = 0.0
        self.y2 = 0.0

    def _set_coefficients(
        self, a0: float, a1: float, a2: float, a3: float, a4: float
    ) -> None:
        self.a0 = a0
        self.a1 = a1
        self.a2 = a2
        self.a3 = a3
        self.a4 = a4

    @property
    def coefficients(self) -> tuple[float, float, float, float, float]:
        """The five coefficients (a0, a1, a2, a3, a4)."""
        return (self.a0, self.a1, self.a2, self.a3, self.a4)

    def __call__(self, s: float) -> float:
        r = (
            self.a0 * s
            + self.a1 * self.x1
            + self.a2 * self.x2
            - self.a3 * self.y1
            - self.a4 * self.y2
        )
        self.x2 = self.x1
        self.x1 = s
        self.y2 = self.y1
        self.y1 = r
        return r

    def config(self, a0: float, a1: float, a2: float, a3: float, a4: float) -> None:
        """Replace the coefficients, keeping the sample delays."""
        self._set_coefficients(a0, a1, a2, a3, a4)


def _omega(f: float, sps: float) -> tuple[float, float, float]:
    omega = 2.0 * math.pi * f / sps
    return omega, math.sin(omega), math.cos(omega)


def _alpha(
    omega: float, sin_w: float, q: float | Bandwidth, allow_bandwidth: bool
) -> float:
    if isinstance(q, Bandwidth):
        if not allow_bandwidth:
            raise TypeError("this filter takes a Q factor, not a Bandwidth")
        return sin_w * math.sinh(math.log(2.0) / 2.0 * q.val * omega / sin_w)
    return sin_w / (2.0 * q)


def _normalized(
    b0: float, b1: float, b2: float, a0: float, a1: float, a2: float
) -> tuple[float, float, float, float, float]:
    return (b0 / a0, b1 / a0, b2 / a0, a1 / a0, a2 / a0)


def _gain_terms(db_gain: float) -> tuple[float, float]:
    a = 10.0 ** (db_gain / 40.0)
    return a, math.sqrt(a + a)


def _lowpass(f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, False)
    return _normalized(
        (1.0 - cos_w) / 2.0,
        1.0 - cos_w,
        (1.0 - cos_w) / 2.0,
        1.0 + alpha,
        -2.0 * cos_w,
        1.0 - alpha,
    )


def _highpass(f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, False)
    return _normalized(
        (1.0 + cos_w) / 2.0,
        -(1.0 + cos_w),
        (1.0 + cos_w) / 2.0,
        1.0 + alpha,
        -2.0 * cos_w,
        1.0 - alpha,
    )


def _bandpass_csg(f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, True)
    return _normalized(
        sin_w / 2.0, 0.0, -sin_w / 2.0, 1.0 + alpha, -2.0 * cos_w, 1.0 - alpha
    )


def _bandpass_cpg(f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, True)
    return _normalized(alpha, 0.0, -alpha, 1.0 + alpha, -2.0 * cos_w, 1.0 - alpha)


def _allpass(f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, False)
    return _normalized(
        1.0 - alpha, -2.0 * cos_w, 1.0 + alpha, 1.0 + alpha, -2.0 * cos_w, 1.0 - alpha
    )


def _notch(f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, True)
    return _normalized(
        1.0, -2.0 * cos_w, 1.0, 1.0 + alpha, -2.0 * cos_w, 1.0 - alpha
    )


def _peaking(db_gain, f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    alpha = _alpha(omega, sin_w, q, True)
    a, _ = _gain_terms(db_gain)
    return _normalized(
        1.0 + alpha * a,
        -2.0 * cos_w,
        1.0 - alpha * a,
        1.0 + alpha / a,
        -2.0 * cos_w,
        1.0 - alpha / a,
    )


def _lowshelf(db_gain, f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    _alpha(omega, sin_w, q, False)
    a, beta = _gain_terms(db_gain)
    return _normalized(
        a * ((a + 1.0) - (a - 1.0) * cos_w + beta * sin_w),
        2.0 * a * ((a - 1.0) - (a + 1.0) * cos_w),
        a * ((a + 1.0) - (a - 1.0) * cos_w - beta * sin_w),
        (a + 1.0) + (a - 1.0) * cos_w + beta * sin_w,
        -2.0 * ((a - 1.0) + (a + 1.0) * cos_w),
        (a + 1.0) + (a - 1.0) * cos_w - beta * sin_w,
    )


def _highshelf(db_gain, f, sps, q):
    omega, sin_w, cos_w = _omega(f, sps)
    _alpha(omega, sin_w, q, False)
    a, beta = _gain_terms(db_gain)
    return _normalized(
        a * ((a + 1.0) + (a - 1.0) * cos_w + beta * sin_w),
        -2.0 * a * ((a - 1.0) + (a + 1.0) * cos_w),
        a * ((a + 1.0) + (a - 1.0) * cos_w - beta * sin_w),
        (a + 1.0) - (a - 1.0) * cos_w + beta * sin_w,
        2.0 * ((a - 1.0) - (a + 1.0) * cos_w),
        (a + 1.0) - (a - 1.0) * cos_w - beta * sin_w,
    )


class LowPass(Biquad):
    """Low pass filter."""

    def __init__(self, f: float, sps: float, q: float = _DEFAULT_Q) -> None:
        super().__init__(*_lowpass(f, sps, q))

    def config(self, f: float, sps: float, q: float = _DEFAULT_Q) -> None:  # type: ignore[override]
        self._set_coefficients(*_lowpass(f, sps, q))


class HighPass(Biquad):
    """High pass filter."""

    def __init__(self, f: float, sps: float, q: float = _DEFAULT_Q) -> None:
        super().__init__(*_highpass(f, sps, q))

    def config(self, f: float, sps: float, q: float = _DEFAULT_Q) -> None:  # type: ignore[override]
        self._set_coefficients(*_highpass(f, sps, q))


class BandPassCSG(Biquad):
    """Band pass filter with constant skirt gain; peak gain equals Q."""

    def __init__(self, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q) -> None:
        super().__init__(*_bandpass_csg(f, sps, q))

    def config(self, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q) -> None:  # type: ignore[override]
        self._set_coefficients(*_bandpass_csg(f, sps, q))


class BandPassCPG(Biquad):
    """Band pass filter with constant 0 dB peak gain."""

    def __init__(self, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q) -> None:
        super().__init__(*_bandpass_cpg(f, sps, q))

    def config(self, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q) -> None:  # type: ignore[override]
        self._set_coefficients(*_bandpass_cpg(f, sps, q))


class AllPass(Biquad):
    """All pass filter."""

    def __init__(self, f: float, sps: float, q: float = _DEFAULT_Q) -> None:
        super().__init__(*_allpass(f, sps, q))

    def config(self, f: float, sps: float, q: float = _DEFAULT_Q) -> None:  # type: ignore[override]
        self._set_coefficients(*_allpass(f, sps, q))


class Notch(Biquad):
    """Notch filter."""

    def __init__(self, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q) -> None:
        super().__init__(*_notch(f, sps, q))

    def config(self, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q) -> None:  # type: ignore[override]
        self._set_coefficients(*_notch(f, sps, q))


class Peaking(Biquad):
    """Peaking equalizer filter with a gain in decibels."""

    def __init__(
        self, db_gain: float, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q
    ) -> None:
        super().__init__(*_peaking(db_gain, f, sps, q))

    def config(  # type: ignore[override]
        self, db_gain: float, f: float, sps: float, q: float | Bandwidth = _DEFAULT_Q
    ) -> None:
        self._set_coefficients(*_peaking(db_gain, f, sps, q))


class LowShelf(Biquad):
    """Low shelf filter with a gain in decibels."""

    def __init__(
        self, db_gain: float, f: float, sps: float, q: float = _DEFAULT_Q
    ) -> None:
        super().__init__(*_lowshelf(db_gain, f, sps, q))

    def config(  # type: ignore[override]
        self, db_gain: float, f: float, sps: float, q: float = _DEFAULT_Q
    ) -> None:
        self._set_coefficients(*_lowshelf(db_gain, f, sps, q))


class HighShelf(Biquad):
    """High shelf filter with a gain in decibels."""

    def __init__(
        self, db_gain: float, f: float, sps: float, q: float = _DEFAULT_Q
    ) -> None:
        super().__init__(*_highshelf(db_gain, f, sps, q))

    def config(  # type: ignore[override]
        self, db_gain: float, f: float, sps: float, q: float = _DEFAULT_Q
    ) -> None:
        self._set_coefficients(*_highshelf(db_gain, f, sps, q))