import math

import pytest

from qdsp.fft import fft


def _as_complex(values):
    return [complex(re, im) for re, im in zip(values[0::2], values[1::2])]


def _exponential(n, k):
    data = []
    for i in range(n):
        angle = 2.0 * math.pi * k * i / n
        data.extend((math.cos(angle), math.sin(angle)))
    return data


def _three_sines():
    # Three sines with p = 7, n = 128, 2n samples.
    n = 1 << 7
    two_n = n * 2
    return [
        0.4 * math.sin(2 * math.pi * i * 10 / two_n)
        + 0.5 * math.sin(2 * math.pi * i * 20 / two_n)
        + 0.1 * math.sin(2 * math.pi * i * 30 / two_n)
        for i in range(two_n)
    ]


def test_three_sines_parseval():
    data = _three_sines()
    out = fft(data)
    n = len(data) // 2
    assert sum(v * v for v in out) == pytest.approx(n * sum(v * v for v in data))


def test_input_not_modified():
    data = _three_sines()
    copy = list(data)
    fft(data)
    assert data == copy


@pytest.mark.parametrize("n", [2, 4, 8, 16, 128])
def test_impulse_gives_flat_spectrum(n):
    data = [0.0] * (2 * n)
    data[0] = 1.0
    for value in _as_complex(fft(data)):
        assert value.real == pytest.approx(1.0)
        assert value.imag == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("n", [2, 4, 8, 16, 128])
def test_constant_gives_dc_spike(n):
    data = [1.0, 0.0] * n
    bins = _as_complex(fft(data))
    assert bins[0].real == pytest.approx(n)
    for value in bins[1:]:
        assert abs(value) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("n,k", [(4, 1), (4, 3), (8, 3), (16, 5), (64, 17), (128, 100)])
def test_complex_exponential_lands_in_one_bin(n, k):
    bins = _as_complex(fft(_exponential(n, k)))
    for j, value in enumerate(bins):
        if j == k:
            assert value.real == pytest.approx(n)
            assert value.imag == pytest.approx(0.0, abs=1e-9)
        else:
            assert abs(value) == pytest.approx(0.0, abs=1e-9)


def test_linearity():
    a = _exponential(16, 2)
    b = _exponential(16, 7)
    combined = fft([x + 2 * y for x, y in zip(a, b)])
    separate = [x + 2 * y for x, y in zip(fft(a), fft(b))]
    assert combined == pytest.approx(separate, abs=1e-9)


@pytest.mark.parametrize("size", [0, 1, 2, 3, 6, 12, 24])
def test_bad_sizes_raise(size):
    with pytest.raises(ValueError):
        fft([0.0] * size)