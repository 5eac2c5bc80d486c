"""Phase-driven saw and pulse oscillators with polyBLEP antialiasing.

A phase is an unsigned 32-bit integer where 0 up to the maximum value spans
one full cycle (0 to 2π).
"""

from __future__ import annotations

_PHASE_BITS = 32
_PHASE_MASK = (1 << _PHASE_BITS) - 1
_ONE_CYC = _PHASE_MASK
_PHASE_END = _ONE_CYC


def frac_to_phase(frac: float) -> int:
    """Convert a fraction of a cycle (0.0 to 1.0) to a phase."""
    return int(frac * _ONE_CYC) & _PHASE_MASK


def phase_step(freq: float, sps: float) -> int:
    """Phase increment per sample for a frequency at a sampling rate."""
    return int((float(1 << _PHASE_BITS) * freq) / sps) & _PHASE_MASK


def _frac_float(p: int) -> float:
    return p / _ONE_CYC


def poly_blep(p: int, dt: int) -> float:
    """Polynomial band-limited step correction at phase p for step dt."""
    if p < dt:
        t = p / dt
        return t + t - t * t - 1.0
    if p > _PHASE_END - dt:
        t = -(_PHASE_END - p) / dt
        return t * t + t + t + 1.0
    return 0.0


def poly_blamp(p: int, dt: int, scale: float) -> float:
    """Polynomial band-limited ramp correction at phase p for step dt."""
    if p < dt:
        t = (p / dt) - 1.0
        return -scale / 3 * _frac_float(dt) * t * t * t
    if p > _PHASE_END - dt:
        t = -((_PHASE_END - p) / dt) + 1.0
        return scale / 3 * _frac_float(dt) * t * t * t
    return 0.0


def basic_saw(p: int) -> float:
    """Sawtooth from -1.0 to 1.0 over one cycle (not band limited)."""
    return (p * (2.0 / _ONE_CYC)) - 1.0


def saw(p: int, dt: int) -> float:
    """Band-limited sawtooth at phase p for phase step dt."""
    return basic_saw(p) - poly_blep(p, dt)


class BasicPulseOsc:
    """Pulse oscillator (not band limited) with a duty-cycle width of 0.0 to 1.0."""

    def __init__(self, width: float = 0.5) -> None:
        self.width = width

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, width: float) -> None:
        self._width = width
        self.shift = frac_to_phase(width)

    def __call__(self, p: int) -> float:
        return 1.0 if p < self.shift else -1.0


class PulseOsc(BasicPulseOsc):
    """Band-limited pulse oscillator."""

    def __call__(self, p: int, dt: int) -> float:  # type: ignore[override]
        r = 1.0 if p < self.shift else -1.0
        r += poly_blep(p, dt)
        r -= poly_blep((p + (_PHASE_END - self.shift)) & _PHASE_MASK, dt)
        return r