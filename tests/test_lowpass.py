import pytest

from qdsp.lowpass import (
    DynamicSmoother,
    FixedPtLeakyIntegrator,
    LeakyIntegrator,
    OnePoleLowpass,
    ResoFilter,
)


def test_fixed_pt_first_output_is_input():
    integ = FixedPtLeakyIntegrator(16)
    assert integ(100) == 100


def test_fixed_pt_settles_at_input_times_gain():
    integ = FixedPtLeakyIntegrator(16)
    for _ in range(2000):
        y = integ(100)
    assert y // integ.gain == 100
    assert isinstance(y, int)


def test_fixed_pt_gain_is_k():
    assert FixedPtLeakyIntegrator(8).gain == 8


def test_fixed_pt_rejects_non_positive_k():
    with pytest.raises(ValueError):
        FixedPtLeakyIntegrator(0)


def test_fixed_pt_negative_input_symmetric():
    pos = FixedPtLeakyIntegrator(16)
    neg = FixedPtLeakyIntegrator(16)
    for _ in range(50):
        p = pos(37)
        n = neg(-37)
    assert n == -p


def test_leaky_integrator_converges_to_constant():
    li = LeakyIntegrator(0.9)
    for _ in range(1000):
        y = li(0.5)
    assert y == pytest.approx(0.5)


def test_leaky_integrator_cutoff_matches_at_frequency():
    a = LeakyIntegrator.at_frequency(100.0, 48000.0)
    b = LeakyIntegrator()
    b.cutoff(100.0, 48000.0)
    assert a.a == b.a
    assert 0.0 < a.a < 1.0


def test_one_pole_lowpass_extremes():
    through = OnePoleLowpass(1.0)
    hold = OnePoleLowpass(0.0)
    assert [through(v) for v in (0.3, -0.2, 0.7)] == [0.3, -0.2, 0.7]
    assert [hold(v) for v in (0.3, -0.2, 0.7)] == [0.0, 0.0, 0.0]


def test_one_pole_lowpass_converges_and_is_monotonic():
    lp = OnePoleLowpass.at_frequency(1000.0, 48000.0)
    out = [lp(1.0) for _ in range(2000)]
    assert all(b >= a for a, b in zip(out, out[1:]))
    assert out[-1] == pytest.approx(1.0)


def test_one_pole_lowpass_cutoff_matches_at_frequency():
    a = OnePoleLowpass.at_frequency(440.0, 44100.0)
    b = OnePoleLowpass(0.5)
    b.cutoff(440.0, 44100.0)
    assert a.a == b.a


def test_reso_filter_without_resonance_settles_to_input():
    rf = ResoFilter(0.5, 0.0)
    for _ in range(500):
        y = rf(0.8)
    assert y == pytest.approx(0.8)


def test_reso_filter_unity_cutoff_raises():
    with pytest.raises(ValueError):
        ResoFilter(1.0, 0.5)


def test_reso_filter_resonance_matches_construction():
    a = ResoFilter(0.3, 0.7)
    b = ResoFilter(0.3, 0.1)
    b.resonance(0.7)
    assert b.fb == pytest.approx(a.fb)
    assert b.reso == 0.7


def test_reso_filter_cutoff_frequency_matches_at_frequency():
    a = ResoFilter.at_frequency(1000.0, 0.5, 44100.0)
    b = ResoFilter(0.1, 0.5)
    b.cutoff_frequency(1000.0, 44100.0)
    assert b.f == pytest.approx(a.f)
    assert b.fb == pytest.approx(a.fb)


def test_dynamic_smoother_step_response():
    ds = DynamicSmoother(10.0, 48000.0)
    out = [ds(1.0) for _ in range(20000)]
    assert out[0] == 0.0
    assert all(b >= a for a, b in zip(out, out[1:]))
    assert max(out) <= 1.0
    assert out[-1] == pytest.approx(1.0, abs=1e-3)


def test_dynamic_smoother_base_frequency_matches_constructor():
    a = DynamicSmoother(50.0, 48000.0)
    b = DynamicSmoother(5.0, 48000.0)
    b.base_frequency(50.0, 48000.0)
    assert b.g0 == pytest.approx(a.g0)
    assert b.wc == pytest.approx(a.wc)