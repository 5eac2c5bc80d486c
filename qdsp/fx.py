"""Small signal processors: delays, edge detectors, integrators and more."""

from __future__ import annotations

from qdsp.allpass import PolyphaseAllpass


class Delay1:
    """One sample delay."""

    def __init__(self) -> None:
        self.y = 0.0

    def __call__(self, s: float) -> float:
        r = self.y
        self.y = s
        return r

    def reset(self) -> None:
        self.y = 0.0


class Delay2:
    """Two sample delay."""

    def __init__(self) -> None:
        self._d1 = Delay1()
        self._d2 = Delay1()

    @property
    def y(self) -> float:
        """The next sample to come out."""
        return self._d2.y

    def __call__(self, s: float) -> float:
        return self._d2(self._d1(s))

    def reset(self) -> None:
        self._d1.reset()
        self._d2.reset()


class RisingEdge:
    """True when the input goes from false to true."""

    def __init__(self) -> None:
        self.state = False

    def __call__(self, val: bool) -> bool:
        val = bool(val)
        r = val and self.state != val
        self.state = val
        return r


class FallingEdge:
    """True when the input goes from true to false."""

    def __init__(self) -> None:
        self.state = False

    def __call__(self, val: bool) -> bool:
        val = bool(val)
        r = (not val) and self.state != val
        self.state = val
        return r


def _half(v, divisor: int):
    if isinstance(v, int):
        q = abs(v) // divisor
        return q if v >= 0 else -q
    return v / divisor


class FastDownsample:
    """Downsample by two, convolving with {0.25, 0.5, 0.25}.

    Integer samples use integer division; float samples use true division.
    """

    def __init__(self) -> None:
        self.x = 0

    def __call__(self, s1, s2):
        out = self.x + _half(s1, 2)
        self.x = _half(s2, 4)
        return out + self.x


class Integrator:
    """Accumulates gain * s."""

    def __init__(self, gain: float = 0.1) -> None:
        self.gain = gain
        self.y = 0.0

    def __call__(self, s: float) -> float:
        self.y += self.gain * s
        return self.y

    def reset(self) -> None:
        self.y = 0.0


class LevelCrossfade:
    """Fade from signal a to signal b as a control level drops below a pivot.

    pivot and ctrl are in decibels. Above the pivot the output is a; below
    it, a is attenuated by (ctrl - pivot) dB and b fills the rest.
    """

    def __init__(self, pivot: float) -> None:
        self.pivot = pivot

    def __call__(self, a: float, b: float, ctrl: float) -> float:
        if ctrl < self.pivot:
            xfade = 10.0 ** ((ctrl - self.pivot) / 20.0)
            return xfade * a + (1.0 - xfade) * b
        return a


class WindowComparator:
    """Goes true above the high threshold, false below the low one, else holds."""

    def __init__(self, low: float, high: float) -> None:
        self.low = low
        self.high = high
        self.y = False

    def __call__(self, s: float) -> bool:
        if s < self.low:
            self.y = False
        elif s > self.high:
            self.y = True
        return self.y

    def threshold(self, low: float, high: float) -> None:
        self.low = low
        self.high = high


class HilbertQuadrature:
    """Two allpass chains about 90 degrees apart, centred on Nyquist/2.

    Calling it returns the (in-phase, quadrature) pair for one sample.
    """

    def __init__(self) -> None:
        self._first = [
            PolyphaseAllpass(0.47940086558884),
            PolyphaseAllpass(0.87621849353931),
            PolyphaseAllpass(0.976597589508199),
            PolyphaseAllpass(0.997499255935549),
        ]
        self._second = [
            PolyphaseAllpass(0.161758498367701),
            PolyphaseAllpass(0.733028932341491),
            PolyphaseAllpass(0.945349700329113),
            PolyphaseAllpass(0.990599156684529),
        ]
        self._dly = Delay1()

    def __call__(self, s: float) -> tuple[float, float]:
        a = s
        for stage in self._first:
            a = stage(a)
        b = s
        for stage in self._second:
            b = stage(b)
        return self._dly(a), b