import cmath
import math

import pytest

from qdsp.allpass import OnePoleAllpass, PolyphaseAllpass

SPS = 48000.0


def _response(filt, freq, sps=SPS, n=8192):
    h = [filt(1.0 if i == 0 else 0.0) for i in range(n)]
    w = 2.0 * math.pi * freq / sps
    return sum(v * cmath.exp(-1j * w * k) for k, v in enumerate(h))


def test_one_pole_with_zero_coefficient_is_unit_delay():
    ap = OnePoleAllpass(0.0)
    assert [ap(x) for x in (1.0, 2.0, 3.0)] == [0.0, 1.0, 2.0]


@pytest.mark.parametrize("a", [-0.8, -0.3, 0.4, 0.9])
@pytest.mark.parametrize("freq", [200.0, 3000.0, 12000.0])
def test_one_pole_has_unity_magnitude(a, freq):
    assert abs(_response(OnePoleAllpass(a), freq)) == pytest.approx(1.0, rel=1e-4)


@pytest.mark.parametrize("freq", [1000.0, 8000.0, 12000.0, 16000.0])
def test_one_pole_shifts_ninety_degrees_at_pivot(freq):
    h = _response(OnePoleAllpass.at_frequency(freq, SPS), freq)
    assert math.degrees(cmath.phase(h)) == pytest.approx(-90.0, abs=0.05)


def test_pivot_matches_at_frequency():
    ap = OnePoleAllpass(0.5)
    ap.pivot(5000.0, SPS)
    assert ap.a == pytest.approx(OnePoleAllpass.at_frequency(5000.0, SPS).a)


def test_pivot_at_quarter_rate_gives_zero_coefficient():
    ap = OnePoleAllpass.at_frequency(SPS / 4, SPS)
    assert ap.a == pytest.approx(0.0, abs=1e-12)


def test_polyphase_with_zero_coefficient_is_negated_two_sample_delay():
    ap = PolyphaseAllpass(0.0)
    assert [ap(x) for x in (1.0, 2.0, 3.0, 4.0)] == [0.0, 0.0, -1.0, -2.0]


def test_polyphase_first_output_scales_input():
    ap = PolyphaseAllpass(0.47940086558884)
    assert ap(1.0) == pytest.approx(0.47940086558884)


@pytest.mark.parametrize("a", [0.161758498367701, 0.733028932341491, 0.47940086558884])
@pytest.mark.parametrize("freq", [500.0, 6000.0, 18000.0])
def test_polyphase_has_unity_magnitude(a, freq):
    assert abs(_response(PolyphaseAllpass(a), freq)) == pytest.approx(1.0, rel=1e-4)