"""Zero-crossing collection for timing analysis of pulses.

Each rising zero crossing starts a pulse record (:class:`EdgeInfo`) holding
the peak height, the width, the leading and trailing edge frame positions and
the sample values around the crossing. Only the latest pulses within a window
are kept. Every window/2 frames, once at least two edges are collected, the
collector is ready and the edge positions are then shifted left by window/2
so analysis can continue seamlessly into the next window.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from qdsp.utility import smallest_pow2

_BITS = 64
PULSE_HEIGHT_DIFF = 0.8
PULSE_WIDTH_DIFF = 0.85
UNDEFINED_EDGE = -(2**31)


def _lin(db: float) -> float:
    return 10.0 ** (db / 20.0)


def _rel_within(a: float, b: float, eps: float) -> bool:
    return abs(a - b) <= eps * max(abs(a), abs(b))


@dataclass
class EdgeInfo:
    """One pulse bounded by a rising and a falling zero crossing."""

    crossing: tuple[float, float] = (0.0, 0.0)
    peak: float = 0.0
    leading_edge: int = UNDEFINED_EDGE
    trailing_edge: int = UNDEFINED_EDGE
    width: float = 0.0

    def update_peak(self, s: float, frame: int) -> None:
        """Track the peak and note the width once the pulse drops below 30%."""
        self.peak = max(s, self.peak)
        if self.width == 0.0 and s < self.peak * 0.3:
            self.width = frame - self.leading_edge

    def _check_order(self, next_edge: EdgeInfo) -> None:
        if self.leading_edge > next_edge.leading_edge:
            raise ValueError("edges are out of order")

    def period(self, next_edge: EdgeInfo) -> int:
        """Frames between this leading edge and the next one."""
        self._check_order(next_edge)
        return next_edge.leading_edge - self.leading_edge

    def fractional_period(self, next_edge: EdgeInfo) -> float:
        """Period refined by interpolating where each crossing hits zero."""
        self._check_order(next_edge)
        prev1, curr1 = self.crossing
        dx1 = -prev1 / (curr1 - prev1)
        prev2, curr2 = next_edge.crossing
        dx2 = -prev2 / (curr2 - prev2)
        return (next_edge.leading_edge - self.leading_edge) + (dx2 - dx1)

    def similar(self, next_edge: EdgeInfo) -> bool:
        """True when peak heights and widths are close to each other."""
        return _rel_within(
            self.peak, next_edge.peak, 1.0 - PULSE_HEIGHT_DIFF
        ) and _rel_within(self.width, next_edge.width, 1.0 - PULSE_WIDTH_DIFF)


class ZeroCrossingCollector:
    """Collects zero-crossing pulses over a sliding window.

    hysteresis is in decibels (e.g. -40); window is in samples and is rounded
    up to a multiple of 64, with a minimum of 128. Index 0 is the oldest edge
    and ``len(collector) - 1`` the latest.
    """

    def __init__(self, hysteresis: float, window: int) -> None:
        if window < 0:
            raise ValueError(f"window must not be negative, got {window}")
        self._hysteresis = -_lin(hysteresis)
        blocks = max(2, (int(window) + _BITS - 1) // _BITS)
        self._window_size = blocks * _BITS
        capacity = smallest_pow2(self._window_size // 2)
        self._info: deque[EdgeInfo] = deque(
            (EdgeInfo() for _ in range(capacity)), maxlen=capacity
        )
        self._prev = 0.0
        self._state = False
        self._num_edges = 0
        self._frame = 0
        self._ready = False
        self._peak_update = 0.0
        self._peak = 0.0

    @classmethod
    def from_duration(
        cls, hysteresis: float, window: float, sps: float
    ) -> ZeroCrossingCollector:
        """Collector whose window spans the given seconds at sps."""
        return cls(hysteresis, int(window * sps))

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def capacity(self) -> int:
        """Maximum number of edges held."""
        return self._info.maxlen or 0

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def is_reset(self) -> bool:
        return self._frame == 0

    @property
    def state(self) -> bool:
        """The current zero-crossing state (True while above zero)."""
        return self._state

    def peak_pulse(self) -> float:
        """The highest pulse peak seen in the current or previous window."""
        return max(self._peak, self._peak_update)

    def __len__(self) -> int:
        return self._num_edges

    def __getitem__(self, index: int) -> EdgeInfo:
        if not 0 <= index < self._num_edges:
            raise IndexError(f"edge index {index} out of range")
        return self._info[(self._num_edges - 1) - index]

    def _reset(self) -> None:
        self._num_edges = 0
        self._state = False
        self._frame = 0

    def _shift(self, n: int) -> None:
        latest = self._info[0]
        latest.leading_edge -= n
        if not self._state:
            latest.trailing_edge -= n
        i = 1
        while i != self._num_edges:
            info = self._info[i]
            info.leading_edge -= n
            info.trailing_edge -= n
            if info.trailing_edge < 0:
                break
            i += 1
        self._num_edges = i

    def _update_state(self, s: float) -> None:
        if self._ready:
            self._shift(self._window_size // 2)
            self._ready = False
            self._peak = self._peak_update
            self._peak_update = 0.0

        if self._num_edges >= self.capacity:
            self._reset()

        if s > 0.0:
            if not self._state:
                self._info.appendleft(
                    EdgeInfo((self._prev, s), s, self._frame)
                )
                self._num_edges += 1
                self._state = True
            else:
                self._info[0].update_peak(s, self._frame)
            if s > self._peak_update:
                self._peak_update = s
        elif self._state and s < self._hysteresis:
            self._state = False
            self._info[0].trailing_edge = self._frame
            if self._peak == 0.0:
                self._peak = self._peak_update

        self._prev = s

    def __call__(self, s: float) -> bool:
        # Centre the detection on the true zero.
        s += self._hysteresis / 2

        if self._num_edges >= self.capacity:
            self._reset()

        if self._frame == self._window_size // 2 and self._num_edges == 0:
            self._reset()

        self._update_state(s)

        self._frame += 1
        if self._frame >= self._window_size and not self._state:
            self._frame -= self._window_size // 2
            if self._num_edges > 1:
                self._ready = True
            else:
                self._reset()

        return self._state