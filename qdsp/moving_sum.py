"""Moving sum over a window of recent samples."""

from __future__ import annotations

from qdsp.utility import smallest_pow2


class MovingSum:
    """Sum of the latest ``size`` samples.

    The history buffer holds ``max_size`` rounded up to a power of two. The
    window can be resized up to that capacity. With ``update=True`` the sum
    is adjusted to the new window (oldest samples are dropped when
    shrinking, older stored samples are added back when growing); otherwise
    the history and the sum are cleared.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        capacity = smallest_pow2(max_size)
        self._data = [0] * capacity
        self._mask = capacity - 1
        self._pos = 0
        self._size = max_size
        self._sum = 0

    @classmethod
    def from_duration(cls, d: float, sps: float) -> MovingSum:
        """Moving sum whose window spans d seconds at sps samples per second."""
        return cls(int(sps * d))

    def _at(self, i: int):
        """The sample pushed i steps ago (0 is the latest)."""
        return self._data[(self._pos + i) & self._mask]

    def _push(self, s) -> None:
        self._pos = (self._pos - 1) & self._mask
        self._data[self._pos] = s

    @property
    def sum(self):
        """The current sum."""
        return self._sum

    @property
    def size(self) -> int:
        """The current window size in samples."""
        return self._size

    @property
    def capacity(self) -> int:
        """The largest window size the history can hold."""
        return len(self._data)

    def __call__(self, s):
        self._sum += s
        self._sum -= self._at(self._size - 1)
        self._push(s)
        return self._sum

    def resize(self, size: int, update: bool = False) -> None:
        """Change the window size, capped at the capacity."""
        new_size = min(size, self.capacity)
        if update:
            if new_size > self._size:
                for i in range(self._size, new_size):
                    self._sum += self._at(i)
            else:
                for i in range(new_size, self._size):
                    self._sum -= self._at(i)
        else:
            self.clear()
        self._size = new_size

    def resize_duration(self, d: float, sps: float, update: bool = False) -> None:
        """Change the window to span d seconds at sps samples per second."""
        self.resize(int(sps * d), update)

    def clear(self) -> None:
        """Zero the history and the sum."""
        self._data = [0] * len(self._data)
        self._sum = 0

    def fill(self, val) -> None:
        """Fill the whole history with val."""
        self._data = [val] * len(self._data)
        self._sum = val * self._size