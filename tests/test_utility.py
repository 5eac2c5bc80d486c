import pytest

from qdsp.utility import (
    from_float,
    interpolate_linear,
    interpolate_none,
    linear_interpolate,
    smallest_pow2,
    to_float,
)

RESOLUTIONS = [256, 1024, 4096, 65536]


@pytest.mark.parametrize("resolution", RESOLUTIONS)
def test_to_float_range_ends(resolution):
    assert to_float(0, resolution) == -1.0
    assert to_float(resolution // 2, resolution) == 0.0


@pytest.mark.parametrize("resolution", RESOLUTIONS)
def test_to_float_is_monotonic(resolution):
    values = [to_float(s, resolution) for s in range(0, resolution, resolution // 16)]
    assert values == sorted(values)
    assert all(-1.0 <= v < 1.0 for v in values)


@pytest.mark.parametrize("resolution", RESOLUTIONS)
def test_from_float_fixed_points(resolution):
    half = resolution // 2
    assert from_float(0.0, resolution) == half
    assert from_float(1.0, resolution) == resolution - 1
    assert from_float(-1.0, resolution) == 1


@pytest.mark.parametrize("resolution", RESOLUTIONS)
def test_round_trip_stays_close(resolution):
    for s in range(1, resolution, resolution // 8):
        back = from_float(to_float(s, resolution), resolution)
        assert abs(back - s) <= 2


@pytest.mark.parametrize("n", [2, 3, 5, 17, 100, 1000, 4097])
def test_smallest_pow2_invariants(n):
    p = smallest_pow2(n)
    assert p & (p - 1) == 0
    assert p >= n
    assert p // 2 < n


@pytest.mark.parametrize("n", [1, 2, 64, 1024])
def test_smallest_pow2_keeps_powers(n):
    assert smallest_pow2(n) == n


def test_linear_interpolate_endpoints():
    assert linear_interpolate(3.0, 7.0, 0.0) == 3.0
    assert linear_interpolate(3.0, 7.0, 1.0) == 7.0
    assert linear_interpolate(3.0, 7.0, 0.5) == pytest.approx((3.0 + 7.0) / 2)


def test_interpolate_none_truncates():
    buffer = [0.5, 1.5, 2.5, 3.5]
    assert interpolate_none(buffer, 2.7) == buffer[2]
    assert interpolate_none(buffer, 0.0) == buffer[0]


def test_interpolate_linear_on_integer_index():
    buffer = [0.5, 1.5, 2.5, 3.5]
    assert interpolate_linear(buffer, 1.0) == buffer[1]


def test_interpolate_linear_between_samples():
    buffer = [0.0, 10.0, 20.0, 30.0]
    value = interpolate_linear(buffer, 1.25)
    assert value == pytest.approx(12.5)
    assert buffer[1] < value < buffer[2]


def test_interpolate_linear_past_end_raises():
    with pytest.raises(IndexError):
        interpolate_linear([1.0, 2.0], 1.5)