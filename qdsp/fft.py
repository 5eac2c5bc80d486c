"""Radix-2 Cooley-Tukey fast Fourier transform on interleaved complex data."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _scramble(data: list[float], n: int) -> None:
    """Reorder complex pairs into bit-reversed order."""
    j = 1
    for i in range(1, 2 * n, 2):
        if j > i:
            data[j - 1], data[i - 1] = data[i - 1], data[j - 1]
            data[j], data[i] = data[i], data[j]
        m = n
        while m >= 2 and j > m:
            j -= m
            m >>= 1
        j += m


def _butterfly2(d: list[float], o: int) -> None:
    tr, ti = d[o + 2], d[o + 3]
    d[o + 2] = d[o] - tr
    d[o + 3] = d[o + 1] - ti
    d[o] += tr
    d[o + 1] += ti


def _butterfly4(d: list[float], o: int) -> None:
    _butterfly2(d, o)
    tr, ti = d[o + 6], d[o + 7]
    d[o + 6] = d[o + 5] - ti
    d[o + 7] = tr - d[o + 4]
    d[o + 4] += tr
    d[o + 5] += ti

    tr, ti = d[o + 4], d[o + 5]
    d[o + 4] = d[o] - tr
    d[o + 5] = d[o + 1] - ti
    d[o] += tr
    d[o + 1] += ti
    tr, ti = d[o + 6], d[o + 7]
    d[o + 6] = d[o + 2] - tr
    d[o + 7] = d[o + 3] - ti
    d[o + 2] += tr
    d[o + 3] += ti


def _danielson_lanczos(d: list[float], o: int, n: int) -> None:
    if n == 2:
        _butterfly2(d, o)
        return
    if n == 4:
        _butterfly4(d, o)
        return

    half = n // 2
    _danielson_lanczos(d, o, half)
    _danielson_lanczos(d, o + n, half)

    wtemp = -math.sin(math.pi / n)
    wpr = -2.0 * wtemp * wtemp
    wpi = -math.sin(2.0 * math.pi / n)
    wr, wi = 1.0, 0.0
    for i in range(0, n, 2):
        a, b = o + i, o + i + n
        tempr = d[b] * wr - d[b + 1] * wi
        tempi = d[b] * wi + d[b + 1] * wr
        d[b] = d[a] - tempr
        d[b + 1] = d[a + 1] - tempi
        d[a] += tempr
        d[a + 1] += tempi

        wtemp = wr
        wr += wr * wpr - wi * wpi
        wi += wi * wpr + wtemp * wpi


def fft(data: Iterable[float]) -> list[float]:
    """Return the forward FFT of N complex values given as 2N interleaved floats.

    N must be a power of two and at least 2. The input is left untouched.
    """
    values = [float(v) for v in data]
    size = len(values)
    n = size // 2
    if size % 2 or n < 2 or n & (n - 1):
        raise ValueError(
            f"fft needs 2*N interleaved values with N a power of two >= 2, got {size}"
        )
    _scramble(values, n)
    _danielson_lanczos(values, 0, n)
    return values